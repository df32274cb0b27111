"""Basic authorization policy.

This module provides :class:`BasicAuthPolicy`, which implements the
``basic`` auth type in two flavours:

* Trello's API key flow -- ``developer_public_key`` and ``member_token`` are
  sent as the ``key`` and ``token`` query parameters.
* HTTP Basic -- ``username`` and ``password`` are Base64-encoded and sent as
  an ``Authorization: Basic <encoded>`` header per :rfc:`7617`.

When both pairs are complete, both are attached.

See Also:
    :class:`trellokit.auth.base.AuthPolicy` for the base interface.
"""

from __future__ import annotations

import base64

import httpx

from trellokit.auth.base import AuthPolicy
from trellokit.exceptions import CredentialsMissing
from trellokit.models import Request


class BasicAuthPolicy(AuthPolicy):
    """Attach the Trello key/token pair and/or an HTTP Basic header."""

    fields = ("developer_public_key", "member_token", "username", "password")

    @property
    def auth_type(self) -> str:
        return "basic"

    def authorize(self, request: Request) -> Request:
        """Return a copy of *request* carrying the configured credentials.

        Raises:
            CredentialsMissing: If neither the key/token pair nor the
                username/password pair is complete.
        """
        key_pair = ("developer_public_key", "member_token")
        login_pair = ("username", "password")
        has_key_pair = not self._missing(*key_pair)
        has_login_pair = not self._missing(*login_pair)

        if not has_key_pair and not has_login_pair:
            # Report the pair the caller started filling in, if any.
            started = login_pair if any(self.credentials.get(n) for n in login_pair) else key_pair
            missing = self._missing(*started)
            raise CredentialsMissing(
                f"basic authorization requires: {', '.join(missing)}",
                missing=missing,
            )

        if has_key_pair:
            url = httpx.URL(request.uri).copy_merge_params(
                {
                    "key": self.credentials["developer_public_key"],
                    "token": self.credentials["member_token"],
                }
            )
            request = request.with_uri(str(url))

        if has_login_pair:
            raw = f"{self.credentials['username']}:{self.credentials['password']}"
            encoded = base64.b64encode(raw.encode("utf-8")).decode("ascii")
            request = request.with_headers({"Authorization": f"Basic {encoded}"})

        return request
