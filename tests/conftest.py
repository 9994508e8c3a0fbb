"""Shared fixtures for the test suite."""

from __future__ import annotations

import pytest

from app.config import reset_settings_cache

SETTINGS_ENV_VARS = (
    "HOST",
    "PORT",
    "ADVERTISED_HOST",
    "CORS_ALLOW_ORIGINS",
    "BACKEND_URL",
    "API_PATH",
    "CLIENT_TIMEOUT",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    """Start every test from default settings."""

    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_settings_cache()
    yield
    reset_settings_cache()
