"""Basic authorization policy.

Implements the ``basic`` auth type: Trello's ``key``/``token`` query
parameters, HTTP Basic credentials, or both.

See Also:
    :class:`~trellokit.plugins.basic.policy.BasicAuthPolicy`
    :mod:`trellokit.auth.base` for the policy interface contract.
"""

from trellokit.plugins.basic.policy import BasicAuthPolicy

__all__ = ["BasicAuthPolicy"]
