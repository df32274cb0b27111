"""Exception hierarchy for trellokit.

All exceptions inherit from :class:`TrelloError`, so callers that do not
care about the failure category can catch a single type. Every error is
raised to the immediate caller; nothing is retried internally.

Subclass hierarchy::

    TrelloError
    +-- ConfigurationError   unknown configuration attribute
    +-- CredentialsMissing   auth policy lacks required credential fields
    +-- RequestFailed        response code outside {200, 201}
    +-- ExpiredToken         401 carrying the "expired token" marker
    +-- NameResolutionError  unknown resource tag
    +-- TransportError       network-level failure (DNS, refused, timeout)
"""

from __future__ import annotations


class TrelloError(Exception):
    """Base exception for all trellokit errors.

    Args:
        message: Human-readable error description.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(TrelloError):
    """Raised when an unrecognized configuration attribute is supplied."""


class CredentialsMissing(TrelloError):
    """Raised at authorize time when the selected policy lacks credentials.

    Args:
        message: Human-readable error description.
        missing: Names of the configuration fields that were empty.
    """

    def __init__(self, message: str, missing: list[str] | None = None):
        super().__init__(message)
        self.missing = list(missing or [])


class RequestFailed(TrelloError):
    """Raised when the API answers with a status code outside ``{200, 201}``.

    The raw response body is kept on :attr:`body` so callers can inspect
    Trello's error text.
    """

    def __init__(self, body: str, status_code: int | None = None):
        super().__init__(body)
        self.body = body
        self.status_code = status_code


class ExpiredToken(TrelloError):
    """Raised on HTTP 401 when the body reports an expired access token."""

    def __init__(self, body: str):
        super().__init__(body)
        self.body = body
        self.status_code = 401


class NameResolutionError(TrelloError):
    """Raised when a resource tag does not name a registered resource type."""


class TransportError(TrelloError):
    """Raised on network-level failures (timeout, DNS resolution, connection refused)."""
