"""HTTP client module for trellokit.

Classes:
    :class:`Client` -- blocking Trello API client: URL building, auth,
    status mapping, and record hydration.
    :class:`Transport` -- the contract a client sends requests through.
    :class:`HttpTransport` -- default transport backed by :class:`httpx.Client`.

Example::

    from trellokit.client import Client

    with Client(developer_public_key="key", member_token="token") as client:
        me = client.find("member", "me")
"""

from trellokit.client.transport import HttpTransport, Transport
from trellokit.client.trello_client import API_VERSION, Client

__all__ = ["API_VERSION", "Client", "HttpTransport", "Transport"]
