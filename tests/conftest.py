"""Shared test fixtures for trellokit.

Provides helpers for wiring a :class:`~trellokit.client.Client` to an
:class:`httpx.MockTransport` and keeps the process-wide default client from
leaking between tests.
"""

from __future__ import annotations

from typing import Callable

import httpx
import pytest

from trellokit.client import Client, HttpTransport
from trellokit.configuration import CONFIGURABLE_ATTRIBUTES
from trellokit.defaults import reset_client

Handler = Callable[[httpx.Request], httpx.Response]


# ---------------------------------------------------------------------------
# Auto-reset the default client between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_default_client(monkeypatch: pytest.MonkeyPatch) -> None:
    """Forget the default client and clear ``TRELLO_*`` variables.

    The default client is built from the environment on first use, so a
    developer's real credentials must never reach it during tests.
    """
    for name in CONFIGURABLE_ATTRIBUTES:
        monkeypatch.delenv(f"TRELLO_{name.upper()}", raising=False)
    reset_client()
    yield
    reset_client()


# ---------------------------------------------------------------------------
# Client factories
# ---------------------------------------------------------------------------


def _mock_transport(handler: Handler) -> HttpTransport:
    """An :class:`HttpTransport` whose requests are answered by *handler*."""
    return HttpTransport(http_client=httpx.Client(transport=httpx.MockTransport(handler)))


@pytest.fixture
def make_client() -> Callable[..., Client]:
    """Factory building a client whose traffic goes to a handler function.

    Example::

        def test_x(make_client):
            client = make_client(handler, developer_public_key="k", member_token="t")
    """

    def _make(handler: Handler, **attrs: object) -> Client:
        return Client(transport=_mock_transport(handler), **attrs)

    return _make

