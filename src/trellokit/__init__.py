"""trellokit -- a small client for the Trello REST API.

Quick start::

    import trellokit

    client = trellokit.Client(developer_public_key="key", member_token="token")
    board = client.find("board", "4d5ea62fd76aa1136000000c")
    for card in board.cards():
        print(card.name)

Modules:
    client: the Trello client and its httpx transport.
    configuration: credential and connection settings.
    auth: authorization policy base class and selection.
    plugins: the Basic and OAuth 1.0a policies.
    resources: domain records and the tag registry.
    defaults: the process-wide default client.
    urls: API key and token authorization URLs.
    exceptions: exception hierarchy.
"""

from trellokit.client import API_VERSION, Client, HttpTransport, Transport
from trellokit.configuration import Configuration
from trellokit.defaults import configure, get_client, reset_client, set_client
from trellokit.exceptions import (
    ConfigurationError,
    CredentialsMissing,
    ExpiredToken,
    NameResolutionError,
    RequestFailed,
    TransportError,
    TrelloError,
)
from trellokit.resources import Board, Card, List, Member, Organization
from trellokit.urls import authorize_url, public_key_url

__version__ = "0.1.0"

__all__ = [
    "API_VERSION",
    "Board",
    "Card",
    "Client",
    "Configuration",
    "ConfigurationError",
    "CredentialsMissing",
    "ExpiredToken",
    "HttpTransport",
    "List",
    "Member",
    "NameResolutionError",
    "Organization",
    "RequestFailed",
    "Transport",
    "TransportError",
    "TrelloError",
    "authorize_url",
    "configure",
    "get_client",
    "public_key_url",
    "reset_client",
    "set_client",
]
