"""Auth manager -- registry and selector for authorization policies.

The :class:`AuthManager` maps auth-type strings (``"none"``, ``"basic"``,
``"oauth"``) to :class:`~trellokit.auth.base.AuthPolicy` classes and picks
the right one for a :class:`~trellokit.configuration.Configuration`.

Selection follows the configuration's derived mode: OAuth first, then
Basic, then no authorization at all.

See Also:
    :class:`~trellokit.client.trello_client.Client` -- builds its cached
    policy through :meth:`AuthManager.create_policy`.
"""

from __future__ import annotations

from trellokit.auth.base import AuthPolicy, NoAuthPolicy
from trellokit.configuration import Configuration
from trellokit.exceptions import CredentialsMissing


class AuthManager:
    """Registry and selector for authorization policy classes.

    Example::

        manager = create_default_manager()
        policy = manager.create_policy(configuration)
        signed = policy.authorize(request)
    """

    def __init__(self) -> None:
        self._policies: dict[str, type[AuthPolicy]] = {}

    def register(self, auth_type: str, policy_class: type[AuthPolicy]) -> None:
        """Register *policy_class* under *auth_type*, replacing any previous entry."""
        self._policies[auth_type] = policy_class

    def get_policy_class(self, auth_type: str) -> type[AuthPolicy]:
        """Retrieve a registered policy class by auth type.

        Raises:
            CredentialsMissing: If no policy is registered for *auth_type*.
        """
        policy_class = self._policies.get(auth_type)
        if policy_class is None:
            available = ", ".join(sorted(self._policies)) or "(none)"
            raise CredentialsMissing(
                f"No authorization policy registered for type '{auth_type}'. "
                f"Available types: {available}"
            )
        return policy_class

    def select_type(self, configuration: Configuration) -> str:
        """Return the auth type implied by *configuration*."""
        if configuration.uses_oauth():
            return "oauth"
        if configuration.uses_basic_auth():
            return "basic"
        return "none"

    def create_policy(self, configuration: Configuration) -> AuthPolicy:
        """Instantiate the policy for *configuration*'s current credentials."""
        policy_class = self.get_policy_class(self.select_type(configuration))
        return policy_class(configuration.credentials)

    def list_types(self) -> list[str]:
        return sorted(self._policies.keys())


def create_default_manager() -> AuthManager:
    """Create an :class:`AuthManager` pre-loaded with the built-in policies.

    - ``none`` -- :class:`~trellokit.auth.base.NoAuthPolicy`.
    - ``basic`` -- key/token query parameters or HTTP Basic.
    - ``oauth`` -- OAuth 1.0a HMAC-SHA1 request signing.
    """
    from trellokit.plugins.basic import BasicAuthPolicy
    from trellokit.plugins.oauth1 import OAuthPolicy

    manager = AuthManager()
    manager.register("none", NoAuthPolicy)
    manager.register("basic", BasicAuthPolicy)
    manager.register("oauth", OAuthPolicy)
    return manager
