"""Credential and connection settings for a :class:`~trellokit.client.Client`.

The configurable attribute set is fixed. Trying to set anything outside
:data:`CONFIGURABLE_ATTRIBUTES` raises
:class:`~trellokit.exceptions.ConfigurationError`, whether through the
constructor, :meth:`Configuration.set_attributes`, or plain attribute
assignment.

The active authorization mode is derived from which credential fields are
populated, never stored:

* **OAuth** -- any of ``consumer_key``, ``consumer_secret``, ``oauth_token``,
  ``oauth_token_secret`` is set. OAuth wins when Basic fields are present too.
* **Basic** -- otherwise, any of ``developer_public_key``, ``member_token``,
  ``username``, ``password`` is set.
* **None** -- no credential field is set.

Configuration lives in memory only. :meth:`Configuration.from_env` reads
``TRELLO_*`` environment variables for convenience.
"""

from __future__ import annotations

import os
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from trellokit.exceptions import ConfigurationError

DEFAULT_API_BASE = "https://api.trello.com"
ENV_PREFIX = "TRELLO_"

OAUTH_ATTRIBUTES = ("consumer_key", "consumer_secret", "oauth_token", "oauth_token_secret")
BASIC_ATTRIBUTES = ("developer_public_key", "member_token", "username", "password")
CONFIGURABLE_ATTRIBUTES = (
    *BASIC_ATTRIBUTES,
    *OAUTH_ATTRIBUTES,
    "callback",
    "return_url",
    "api_base",
    "timeout",
)


def _check_attributes(names: Any) -> None:
    unknown = sorted(str(name) for name in names if name not in CONFIGURABLE_ATTRIBUTES)
    if unknown:
        raise ConfigurationError(
            f"Unknown configuration attribute(s): {', '.join(unknown)}. "
            f"Recognised attributes: {', '.join(CONFIGURABLE_ATTRIBUTES)}"
        )


class Configuration(BaseModel):
    """Credentials and connection attributes for one client.

    Example::

        config = Configuration(developer_public_key="abc", member_token="xyz")
        assert config.uses_basic_auth()
    """

    model_config = ConfigDict(validate_assignment=True)

    # Trello API key flow / HTTP Basic
    developer_public_key: Optional[str] = None
    member_token: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    # OAuth 1.0a
    consumer_key: Optional[str] = None
    consumer_secret: Optional[str] = None
    oauth_token: Optional[str] = None
    oauth_token_secret: Optional[str] = None
    callback: Optional[str] = None
    return_url: Optional[str] = None
    # Connection
    api_base: str = Field(default=DEFAULT_API_BASE, description="Scheme and host of the API")
    timeout: float = Field(default=30.0, description="Transport timeout in seconds")

    def __init__(self, **data: Any) -> None:
        _check_attributes(data)
        super().__init__(**data)

    def __setattr__(self, name: str, value: Any) -> None:
        if not name.startswith("_"):
            _check_attributes([name])
        super().__setattr__(name, value)

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX) -> Configuration:
        """Build a configuration from ``{prefix}{ATTRIBUTE}`` environment variables.

        Empty variables are ignored so that a blank ``TRELLO_CONSUMER_KEY``
        does not switch the client into OAuth mode.
        """
        values: dict[str, Any] = {}
        for name in CONFIGURABLE_ATTRIBUTES:
            value = os.environ.get(f"{prefix}{name.upper()}")
            if value:
                values[name] = value
        return cls(**values)

    @property
    def attributes(self) -> dict[str, Any]:
        """All configurable attributes and their current values."""
        return self.model_dump()

    def set_attributes(self, attrs: dict[str, Any]) -> None:
        """Bulk-assign *attrs*.

        Every key is validated before anything is assigned, so an unknown key
        leaves the configuration untouched.

        Raises:
            ConfigurationError: If any key is not a configurable attribute.
        """
        _check_attributes(attrs)
        for name, value in attrs.items():
            setattr(self, name, value)

    def uses_oauth(self) -> bool:
        """Return ``True`` when any OAuth credential field is populated."""
        return any(getattr(self, name) for name in OAUTH_ATTRIBUTES)

    def uses_basic_auth(self) -> bool:
        """Return ``True`` when Basic fields are populated and OAuth is not."""
        if self.uses_oauth():
            return False
        return any(getattr(self, name) for name in BASIC_ATTRIBUTES)

    @property
    def credentials(self) -> dict[str, Optional[str]]:
        """The credential subset used by the active authorization mode."""
        if self.uses_oauth():
            names: tuple[str, ...] = (*OAUTH_ATTRIBUTES, "callback", "return_url")
        elif self.uses_basic_auth():
            names = BASIC_ATTRIBUTES
        else:
            return {}
        return {name: getattr(self, name) for name in names}
