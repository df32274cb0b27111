"""OAuth 1.0a request-signing policy.

This module provides :class:`OAuthPolicy`, which implements the ``oauth``
auth type. Every request is signed with HMAC-SHA1 using the consumer key and
secret, plus the access token and secret when present, and the signature is
sent in the ``Authorization`` header (:rfc:`5849` section 3.5.1).

Signing is delegated to :class:`oauthlib.oauth1.Client`, which generates a
fresh nonce and timestamp on each call. Nothing is persisted between calls.

JSON request bodies are not part of the OAuth 1.0a signature base string,
so only the verb and URL (including query parameters) are signed.

See Also:
    :class:`trellokit.auth.base.AuthPolicy` for the base interface.
"""

from __future__ import annotations

from oauthlib import oauth1

from trellokit.auth.base import AuthPolicy
from trellokit.exceptions import CredentialsMissing
from trellokit.models import Request


class OAuthPolicy(AuthPolicy):
    """Sign requests with OAuth 1.0a HMAC-SHA1."""

    fields = (
        "consumer_key",
        "consumer_secret",
        "oauth_token",
        "oauth_token_secret",
        "callback",
    )

    @property
    def auth_type(self) -> str:
        return "oauth"

    def _signer(self) -> oauth1.Client:
        self._require("consumer_key", "consumer_secret")

        token = self.credentials.get("oauth_token")
        token_secret = self.credentials.get("oauth_token_secret")
        if bool(token) != bool(token_secret):
            missing = self._missing("oauth_token", "oauth_token_secret")
            raise CredentialsMissing(
                f"oauth authorization requires: {', '.join(missing)}",
                missing=missing,
            )

        return oauth1.Client(
            self.credentials["consumer_key"],
            client_secret=self.credentials["consumer_secret"],
            resource_owner_key=token or None,
            resource_owner_secret=token_secret or None,
            callback_uri=self.credentials.get("callback") if not token else None,
            signature_method=oauth1.SIGNATURE_HMAC_SHA1,
            signature_type=oauth1.SIGNATURE_TYPE_AUTH_HEADER,
        )

    def authorize(self, request: Request) -> Request:
        """Return a copy of *request* with an OAuth ``Authorization`` header.

        Raises:
            CredentialsMissing: If the consumer key or secret is empty, or if
                only one of the access token and token secret is set.
        """
        uri, headers, _ = self._signer().sign(
            request.uri, http_method=request.verb.value.upper()
        )
        return request.with_uri(uri).with_headers(
            {"Authorization": headers["Authorization"]}
        )
