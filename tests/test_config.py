"""Tests for configuration loading."""

from __future__ import annotations

import pytest

from yuno_mcp.config import (
    OutputFormat,
    YunoConfig,
    environment_suffix,
    parse_output_format,
)
from yuno_mcp.credentials import CredentialStoreAdapter
from yuno_mcp.errors import ConfigError

ENV_VARS = (
    "YUNO_ACCOUNT_CODE",
    "YUNO_PUBLIC_API_KEY",
    "YUNO_PRIVATE_SECRET_KEY",
    "YUNO_API_URL",
    "YUNO_DASHBOARD_URL",
    "YUNO_HTTP_TIMEOUT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestEnvironmentSuffix:
    @pytest.mark.parametrize(
        "key,suffix",
        [
            ("dev_abc", "-dev"),
            ("staging_abc", "-staging"),
            ("sandbox_abc", "-sandbox"),
            ("prod_abc", ""),
        ],
    )
    def test_known_prefixes(self, key, suffix):
        assert environment_suffix(key) == suffix

    def test_unknown_prefix_raises(self):
        with pytest.raises(ConfigError, match="live"):
            environment_suffix("live_abc")


class TestYunoConfig:
    def test_base_url_from_key_prefix(self):
        config = YunoConfig("acc", "sandbox_key", "secret")
        assert config.base_url == "https://api-sandbox.y.uno/v1"
        assert config.dashboard_base_url == "https://dashboard-api-sandbox.y.uno/v1"

    def test_prod_base_url(self):
        config = YunoConfig("acc", "prod_key", "secret")
        assert config.base_url == "https://api.y.uno/v1"

    def test_explicit_url_wins(self):
        config = YunoConfig("acc", "weird_key", "secret", api_url="http://localhost:9000/v1/")
        assert config.base_url == "http://localhost:9000/v1"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("YUNO_ACCOUNT_CODE", "acc")
        monkeypatch.setenv("YUNO_PUBLIC_API_KEY", "dev_key")
        monkeypatch.setenv("YUNO_PRIVATE_SECRET_KEY", "secret")
        monkeypatch.setenv("YUNO_HTTP_TIMEOUT", "12.5")

        config = YunoConfig.from_env()

        assert config.account_code == "acc"
        assert config.base_url == "https://api-dev.y.uno/v1"
        assert config.timeout == 12.5

    def test_from_env_without_timeout_waits_indefinitely(self, monkeypatch):
        monkeypatch.setenv("YUNO_ACCOUNT_CODE", "acc")
        monkeypatch.setenv("YUNO_PUBLIC_API_KEY", "dev_key")
        monkeypatch.setenv("YUNO_PRIVATE_SECRET_KEY", "secret")

        assert YunoConfig.from_env().timeout is None

    def test_from_env_missing_vars(self, monkeypatch):
        monkeypatch.setenv("YUNO_ACCOUNT_CODE", "acc")

        with pytest.raises(ConfigError) as exc_info:
            YunoConfig.from_env()

        assert "YUNO_PUBLIC_API_KEY" in str(exc_info.value)
        assert "YUNO_PRIVATE_SECRET_KEY" in str(exc_info.value)

    def test_bad_timeout(self, monkeypatch):
        monkeypatch.setenv("YUNO_ACCOUNT_CODE", "acc")
        monkeypatch.setenv("YUNO_PUBLIC_API_KEY", "dev_key")
        monkeypatch.setenv("YUNO_PRIVATE_SECRET_KEY", "secret")
        monkeypatch.setenv("YUNO_HTTP_TIMEOUT", "soon")

        with pytest.raises(ConfigError, match="YUNO_HTTP_TIMEOUT"):
            YunoConfig.from_env()

    def test_from_credentials(self, mock_credentials):
        config = YunoConfig.from_credentials(mock_credentials)
        assert config.public_api_key.startswith("sandbox_")
        assert config.base_url == "https://api-sandbox.y.uno/v1"

    def test_from_credentials_missing(self):
        credentials = CredentialStoreAdapter.for_testing({"yuno_account_code": "acc"})
        with pytest.raises(ConfigError, match="public_api_key"):
            YunoConfig.from_credentials(credentials)


class TestOutputFormat:
    def test_default_is_text(self):
        assert parse_output_format(None) is OutputFormat.TEXT
        assert parse_output_format("") is OutputFormat.TEXT

    def test_case_insensitive(self):
        assert parse_output_format("OBJECT") is OutputFormat.OBJECT

    def test_invalid(self):
        with pytest.raises(ConfigError):
            parse_output_format("xml")
