"""Tests for trellokit.configuration -- recognised attributes and auth mode."""

from __future__ import annotations

import pytest

from trellokit.configuration import (
    CONFIGURABLE_ATTRIBUTES,
    DEFAULT_API_BASE,
    Configuration,
)
from trellokit.exceptions import ConfigurationError


class TestAttributes:
    def test_defaults(self) -> None:
        config = Configuration()
        assert config.api_base == DEFAULT_API_BASE
        assert config.timeout == 30.0
        assert config.developer_public_key is None

    def test_unknown_constructor_key(self) -> None:
        with pytest.raises(ConfigurationError, match="bogus"):
            Configuration(bogus="x")

    def test_unknown_attribute_assignment(self) -> None:
        config = Configuration()
        with pytest.raises(ConfigurationError):
            config.bogus = "x"

    def test_set_attributes(self) -> None:
        config = Configuration()
        config.set_attributes({"developer_public_key": "k", "member_token": "t"})
        assert config.developer_public_key == "k"
        assert config.member_token == "t"

    def test_set_attributes_is_all_or_nothing(self) -> None:
        config = Configuration()
        with pytest.raises(ConfigurationError):
            config.set_attributes({"member_token": "t", "nope": 1})
        assert config.member_token is None

    def test_attributes_lists_every_configurable_name(self) -> None:
        assert set(Configuration().attributes) == set(CONFIGURABLE_ATTRIBUTES)

    def test_timeout_is_validated(self) -> None:
        config = Configuration(timeout="12")
        assert config.timeout == 12.0


class TestAuthMode:
    def test_nothing_configured(self) -> None:
        config = Configuration()
        assert not config.uses_oauth()
        assert not config.uses_basic_auth()
        assert config.credentials == {}

    @pytest.mark.parametrize(
        "attrs",
        [
            {"developer_public_key": "k", "member_token": "t"},
            {"username": "u", "password": "p"},
            {"member_token": "t"},
        ],
    )
    def test_basic(self, attrs: dict) -> None:
        config = Configuration(**attrs)
        assert config.uses_basic_auth()
        assert not config.uses_oauth()

    def test_oauth(self) -> None:
        config = Configuration(consumer_key="ck", consumer_secret="cs", callback="https://cb")
        assert config.uses_oauth()
        assert config.credentials["callback"] == "https://cb"
        assert "member_token" not in config.credentials

    def test_oauth_takes_precedence(self) -> None:
        config = Configuration(
            consumer_key="ck",
            consumer_secret="cs",
            developer_public_key="k",
            member_token="t",
        )
        assert config.uses_oauth()
        assert not config.uses_basic_auth()
        assert "developer_public_key" not in config.credentials

    def test_empty_strings_do_not_count(self) -> None:
        config = Configuration(consumer_key="", developer_public_key="k")
        assert not config.uses_oauth()
        assert config.uses_basic_auth()

    def test_basic_credentials(self) -> None:
        config = Configuration(developer_public_key="k", member_token="t")
        assert config.credentials == {
            "developer_public_key": "k",
            "member_token": "t",
            "username": None,
            "password": None,
        }


class TestFromEnv:
    def test_reads_prefixed_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TRELLO_DEVELOPER_PUBLIC_KEY", "envkey")
        monkeypatch.setenv("TRELLO_MEMBER_TOKEN", "envtoken")
        monkeypatch.setenv("TRELLO_TIMEOUT", "5")

        config = Configuration.from_env()
        assert config.developer_public_key == "envkey"
        assert config.member_token == "envtoken"
        assert config.timeout == 5.0

    def test_empty_variables_are_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TRELLO_CONSUMER_KEY", "")
        assert not Configuration.from_env().uses_oauth()

    def test_custom_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MYAPP_CONSUMER_KEY", "ck")
        assert Configuration.from_env(prefix="MYAPP_").consumer_key == "ck"
