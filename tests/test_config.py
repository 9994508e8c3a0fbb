"""Tests for environment driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from app.config import Settings, get_settings, reset_settings_cache


def test_defaults_match_fixed_addresses() -> None:
    settings = Settings(_env_file=None)

    assert settings.host == "0.0.0.0"
    assert settings.port == 5000
    assert settings.cors_allow_origins == ["*"]
    assert settings.client_timeout is None
    assert settings.message_url == "http://localhost:5000/api"
    assert settings.advertised_url == "http://localhost:5000"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("ADVERTISED_HOST", "203.0.113.7")
    monkeypatch.setenv("BACKEND_URL", "http://backend.internal:8080/")
    monkeypatch.setenv("API_PATH", "api")
    monkeypatch.setenv("CLIENT_TIMEOUT", "2.5")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings(_env_file=None)

    assert settings.advertised_url == "http://203.0.113.7:8080"
    assert settings.message_url == "http://backend.internal:8080/api"
    assert settings.client_timeout == 2.5
    assert settings.log_level == "DEBUG"


def test_cors_origins_parsed_from_json(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", '["http://localhost:3000"]')

    assert Settings(_env_file=None).cors_allow_origins == ["http://localhost:3000"]


@pytest.mark.parametrize("port", ["0", "70000"])
def test_port_out_of_range_is_rejected(monkeypatch: pytest.MonkeyPatch, port: str) -> None:
    monkeypatch.setenv("PORT", port)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_get_settings_is_cached_until_reset(monkeypatch: pytest.MonkeyPatch) -> None:
    first = get_settings()
    assert get_settings() is first

    monkeypatch.setenv("PORT", "5050")
    assert get_settings().port == 5000

    reset_settings_cache()
    assert get_settings().port == 5050
