"""Pluggable authorization for trellokit.

- :class:`AuthPolicy` -- abstract base class for authorization strategies.
- :class:`NoAuthPolicy` -- identity policy used when nothing is configured.
- :class:`AuthManager` -- maps auth types to policy classes and selects one
  from a :class:`~trellokit.configuration.Configuration`.
- :func:`create_default_manager` -- manager with the ``none``, ``basic`` and
  ``oauth`` policies registered.

Typical usage::

    from trellokit.auth import create_default_manager

    policy = create_default_manager().create_policy(configuration)
    request = policy.authorize(request)
"""

from trellokit.auth.base import AuthPolicy, NoAuthPolicy
from trellokit.auth.manager import AuthManager, create_default_manager

__all__ = [
    "AuthPolicy",
    "AuthManager",
    "NoAuthPolicy",
    "create_default_manager",
]
