"""Abstract base class for authorization policies.

An authorization policy takes an outgoing
:class:`~trellokit.models.Request` and returns an equivalent request with
credentials attached, either as headers or as signed query parameters.

To implement a new policy, subclass :class:`AuthPolicy`, set
:attr:`~AuthPolicy.auth_type`, and implement :meth:`~AuthPolicy.authorize`.
The constructor receives the credential mapping produced by
:attr:`~trellokit.configuration.Configuration.credentials`; a policy keeps
only the fields it needs.

See Also:
    :mod:`trellokit.auth.manager` for policy registration and selection.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from trellokit.exceptions import CredentialsMissing
from trellokit.models import Request


class AuthPolicy(ABC):
    """Abstract base class for authorization policies.

    Args:
        credentials: Credential field names mapped to their values. Fields
            the policy does not use are ignored.
    """

    #: Credential fields this policy reads from the mapping.
    fields: tuple[str, ...] = ()

    def __init__(self, credentials: Optional[dict[str, Optional[str]]] = None) -> None:
        credentials = credentials or {}
        self.credentials: dict[str, Optional[str]] = {
            name: credentials.get(name) for name in self.fields
        }

    @property
    @abstractmethod
    def auth_type(self) -> str:
        """Return the identifier of this policy (``"none"``, ``"basic"``, ``"oauth"``)."""
        ...

    @abstractmethod
    def authorize(self, request: Request) -> Request:
        """Return *request* with authorization material attached.

        Implementations must not mutate *request*; they return a copy.

        Raises:
            CredentialsMissing: If the fields the policy needs are empty.
        """
        ...

    def _missing(self, *names: str) -> list[str]:
        return [name for name in names if not self.credentials.get(name)]

    def _require(self, *names: str) -> None:
        missing = self._missing(*names)
        if missing:
            raise CredentialsMissing(
                f"{self.auth_type} authorization requires: {', '.join(missing)}",
                missing=missing,
            )

    def __repr__(self) -> str:
        return f"<{type(self).__name__}>"


class NoAuthPolicy(AuthPolicy):
    """Leave requests untouched.

    Selected when no credentials are configured. Endpoints that need
    authorization fail at the response layer instead.
    """

    @property
    def auth_type(self) -> str:
        return "none"

    def authorize(self, request: Request) -> Request:
        return request
