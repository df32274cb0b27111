"""Process-wide default client.

Records that were built without a client (``Board(name="x")``) fall back to
the default client returned by :func:`get_client`. It is created lazily from
``TRELLO_*`` environment variables unless one is installed with
:func:`set_client`.

Clients built explicitly never share state with the default client.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional

from trellokit.client import Client
from trellokit.configuration import Configuration

_client: Optional[Client] = None


def get_client() -> Client:
    """Return the default :class:`~trellokit.client.Client`.

    If none has been installed via :func:`set_client`, one is created from
    :meth:`Configuration.from_env() <trellokit.configuration.Configuration.from_env>`.
    """
    global _client
    if _client is None:
        _client = Client(Configuration.from_env())
    return _client


def set_client(client: Client) -> None:
    """Install *client* as the default client."""
    global _client
    _client = client


def reset_client() -> None:
    """Close and forget the default client.

    Primarily useful in test suites to ensure a clean state between tests.
    """
    global _client
    if _client is not None:
        _client.close()
    _client = None


@contextmanager
def configure() -> Iterator[Configuration]:
    """Edit the default client's configuration.

    Example::

        import trellokit

        with trellokit.configure() as config:
            config.developer_public_key = "key"
            config.member_token = "token"
    """
    with get_client().configure() as configuration:
        yield configuration
