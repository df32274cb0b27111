"""Tests for the httpx-backed transport."""

from __future__ import annotations

import json

import httpx
import pytest

from trellokit.client.transport import HttpTransport
from trellokit.exceptions import TransportError
from trellokit.models import HTTPVerb, Request, Response


def _transport(handler) -> HttpTransport:
    return HttpTransport(http_client=httpx.Client(transport=httpx.MockTransport(handler)))


class TestExecute:
    def test_returns_code_and_body(self) -> None:
        transport = _transport(lambda request: httpx.Response(200, text='{"id": "1"}'))
        response = transport.execute(Request(verb=HTTPVerb.GET, uri="https://api.trello.com/1/boards/1"))
        assert isinstance(response, Response)
        assert response.code == 200
        assert response.body == '{"id": "1"}'

    def test_sends_headers(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.headers["authorization"] == "Basic abc"
            return httpx.Response(200)

        _transport(handler).execute(
            Request(
                verb=HTTPVerb.GET,
                uri="https://api.trello.com/1/boards/1",
                headers={"Authorization": "Basic abc"},
            )
        )

    def test_post_body_is_json(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.headers["content-type"] == "application/json"
            assert json.loads(request.content) == {"name": "x", "closed": False}
            return httpx.Response(201, text="{}")

        response = _transport(handler).execute(
            Request(
                verb=HTTPVerb.POST,
                uri="https://api.trello.com/1/boards",
                body={"name": "x", "closed": False},
            )
        )
        assert response.code == 201

    def test_get_ignores_body(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.content == b""
            return httpx.Response(200)

        _transport(handler).execute(
            Request(verb=HTTPVerb.GET, uri="https://api.trello.com/1/x", body={"a": 1})
        )

    def test_error_statuses_are_returned_not_raised(self) -> None:
        transport = _transport(lambda request: httpx.Response(500, text="boom"))
        response = transport.execute(Request(verb=HTTPVerb.DELETE, uri="https://api.trello.com/1/x"))
        assert response.code == 500
        assert response.body == "boom"

    def test_network_error_raises_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        transport = _transport(handler)
        with pytest.raises(TransportError) as exc_info:
            transport.execute(
                Request(verb=HTTPVerb.GET, uri="https://api.trello.com/1/x?key=k&token=secret")
            )
        assert "secret" not in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


class TestLifecycle:
    def test_client_is_created_lazily(self) -> None:
        transport = HttpTransport(timeout=3)
        assert transport._client is None
        http_client = transport.http_client
        assert http_client.timeout.connect == 3
        transport.close()
        assert transport._client is None

    def test_close_without_client_is_noop(self) -> None:
        HttpTransport().close()
