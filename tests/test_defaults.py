"""Tests for the process-wide default client."""

from __future__ import annotations

import pytest

import trellokit
from trellokit.client import Client
from trellokit.defaults import configure, get_client, reset_client, set_client


class TestDefaultClient:
    def test_created_lazily_and_reused(self) -> None:
        client = get_client()
        assert isinstance(client, Client)
        assert get_client() is client

    def test_built_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TRELLO_DEVELOPER_PUBLIC_KEY", "envkey")
        monkeypatch.setenv("TRELLO_MEMBER_TOKEN", "envtoken")
        client = get_client()
        assert client.developer_public_key == "envkey"
        assert client.auth_policy.auth_type == "basic"

    def test_set_and_reset(self) -> None:
        installed = Client()
        set_client(installed)
        assert get_client() is installed
        reset_client()
        assert get_client() is not installed

    def test_configure_edits_default_client(self) -> None:
        with configure() as config:
            config.member_token = "t"
        assert get_client().member_token == "t"

    def test_explicit_clients_are_independent(self) -> None:
        with configure() as config:
            config.member_token = "default"
        assert Client().member_token is None

    def test_package_exports(self) -> None:
        assert trellokit.get_client is get_client
        assert trellokit.API_VERSION == 1
        assert issubclass(trellokit.ExpiredToken, trellokit.TrelloError)
        assert not issubclass(trellokit.ExpiredToken, trellokit.RequestFailed)
