"""Built-in authorization policies.

Each policy lives in its own sub-package:

- :mod:`trellokit.plugins.basic` -- key/token query parameters and HTTP Basic.
- :mod:`trellokit.plugins.oauth1` -- OAuth 1.0a request signing.

Policies are registered with :class:`~trellokit.auth.manager.AuthManager`
by :func:`~trellokit.auth.manager.create_default_manager`.
"""
