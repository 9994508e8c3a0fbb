"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    host: str = Field(
        default="0.0.0.0",
        description="Interface the API responder binds to",
        min_length=1,
    )
    port: int = Field(
        default=5000,
        description="TCP port the API responder listens on",
        ge=1,
        le=65535,
    )
    advertised_host: str = Field(
        default="localhost",
        description="Host name reported in the startup log line",
        min_length=1,
    )
    cors_allow_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to call the API",
    )
    backend_url: str = Field(
        default="http://localhost:5000",
        description="Base URL the display client requests the message from",
        min_length=1,
    )
    api_path: str = Field(
        default="/api",
        description="Path of the message endpoint",
    )
    client_timeout: float | None = Field(
        default=None,
        description="Seconds before the display client gives up; unset waits forever",
        gt=0,
    )
    log_level: str = Field(
        default="INFO",
        description="Root logging level used by the launchers",
    )

    @field_validator("api_path")
    @classmethod
    def _ensure_leading_slash(cls, value: str) -> str:
        if not value.startswith("/"):
            return f"/{value}"
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.strip().upper() or "INFO"

    @property
    def advertised_url(self) -> str:
        """URL announced when the server starts."""

        return f"http://{self.advertised_host}:{self.port}"

    @property
    def message_url(self) -> str:
        """Absolute URL of the message endpoint as seen by the client."""

        return f"{self.backend_url.rstrip('/')}{self.api_path}"


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
