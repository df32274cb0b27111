"""OAuth 1.0a authorization policy.

Implements the ``oauth`` auth type, which signs each request with the
configured consumer and access-token secrets.

See Also:
    :class:`~trellokit.plugins.oauth1.policy.OAuthPolicy`
"""

from trellokit.plugins.oauth1.policy import OAuthPolicy

__all__ = ["OAuthPolicy"]
