"""Tests for environment-based settings."""

import pytest

from wacloudapi.core.config import DEFAULT_API_VERSION, GRAPH_API_URL, Settings

ENV_VARS = [
    "LOG_LEVEL",
    "LOG_DIR",
    "ENVIRONMENT",
    "API_VERSION",
    "BASE_URL",
    "REQUEST_TIMEOUT",
    "WP_ACCESS_TOKEN",
    "WP_PHONE_ID",
    "WP_BID",
    "WHATSAPP_APP_ID",
    "WHATSAPP_WEBHOOK_VERIFY_TOKEN",
    "WHATSAPP_APP_SECRET",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings()

    assert settings.api_version == DEFAULT_API_VERSION == "v21.0"
    assert settings.base_url == GRAPH_API_URL == "https://graph.facebook.com"
    assert settings.request_timeout == 30.0
    assert settings.log_level == "INFO"
    assert settings.is_development
    assert not settings.is_production
    assert settings.access_token is None


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("WP_ACCESS_TOKEN", "EAAtoken")
    monkeypatch.setenv("WP_PHONE_ID", "123")
    monkeypatch.setenv("WP_BID", "456")
    monkeypatch.setenv("API_VERSION", "v20.0")
    monkeypatch.setenv("BASE_URL", "https://custom.api.com")
    monkeypatch.setenv("REQUEST_TIMEOUT", "12.5")
    monkeypatch.setenv("ENVIRONMENT", "prod")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings()

    assert settings.access_token == "EAAtoken"
    assert settings.phone_number_id == "123"
    assert settings.waba_id == "456"
    assert settings.api_version == "v20.0"
    assert settings.base_url == "https://custom.api.com"
    assert settings.request_timeout == 12.5
    assert settings.is_production
    assert settings.log_level == "DEBUG"


def test_unknown_environment_falls_back_to_dev(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "staging")

    assert Settings().environment == "DEV"


def test_invalid_log_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "VERBOSE")

    with pytest.raises(ValueError, match="LOG_LEVEL"):
        Settings()


@pytest.mark.parametrize("timeout", ["0", "-5"])
def test_non_positive_timeout(monkeypatch, timeout):
    monkeypatch.setenv("REQUEST_TIMEOUT", timeout)

    with pytest.raises(ValueError, match="REQUEST_TIMEOUT"):
        Settings()


def test_client_credentials_required(monkeypatch):
    with pytest.raises(ValueError, match="WP_ACCESS_TOKEN"):
        Settings().validate_client_credentials()

    monkeypatch.setenv("WP_ACCESS_TOKEN", "EAAtoken")
    with pytest.raises(ValueError, match="WP_PHONE_ID"):
        Settings().validate_client_credentials()

    monkeypatch.setenv("WP_PHONE_ID", "123")
    Settings().validate_client_credentials()


def test_webhook_credentials_required(monkeypatch):
    monkeypatch.setenv("WHATSAPP_APP_SECRET", "secret")

    with pytest.raises(ValueError, match="WHATSAPP_WEBHOOK_VERIFY_TOKEN"):
        Settings().validate_webhook_credentials()


def test_repr_hides_token(monkeypatch):
    monkeypatch.setenv("WP_ACCESS_TOKEN", "EAAsupersecret")

    text = repr(Settings())

    assert "EAAsupersecret" not in text
    assert "access_token=<set>" in text
