"""URLs for obtaining Trello credentials.

- :func:`public_key_url` -- the page where a developer reads their API key.
- :func:`authorize_url` -- the page where a member grants a token to an app
  identified by that key.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx

from trellokit.exceptions import CredentialsMissing

PUBLIC_KEY_URL = "https://trello.com/app-key"
AUTHORIZE_URL = "https://trello.com/1/authorize"


def public_key_url() -> str:
    return PUBLIC_KEY_URL


def authorize_url(
    key: Optional[str] = None,
    name: str = "trellokit",
    scope: str = "read,write,account",
    expiration: str = "never",
    **extra: Any,
) -> str:
    """Build the token authorization URL for the app identified by *key*.

    Args:
        key: Developer API key. Defaults to the default client's
            ``developer_public_key``.
        name: Application name shown to the member.
        scope: Comma-separated permissions to request.
        expiration: Token lifetime (``"1hour"``, ``"1day"``, ``"30days"``,
            ``"never"``).
        **extra: Additional query parameters, e.g. ``return_url``.

    Raises:
        CredentialsMissing: If no key is given or configured.
    """
    if not key:
        from trellokit.defaults import get_client

        key = get_client().configuration.developer_public_key
    if not key:
        raise CredentialsMissing(
            "A developer public key is required; get one at " + PUBLIC_KEY_URL,
            missing=["developer_public_key"],
        )

    params = {
        "key": key,
        "name": name,
        "scope": scope,
        "expiration": expiration,
        "response_type": "token",
        **extra,
    }
    return str(httpx.URL(AUTHORIZE_URL, params=params))
