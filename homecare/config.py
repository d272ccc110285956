"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"

# Header carrying the caller identity between the HTTP gateway and the API.
USER_HEADER = "X-User-Id"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        default="sqlite:///./homecare.db",
        description="Database connection URL used by SQLAlchemy",
        min_length=1,
    )
    app_timezone: str | None = Field(
        default=None,
        description="IANA timezone name or UTC offset used to localize timestamps",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:9002"],
        description="Origins allowed to call the API from a browser",
    )
    notifications_api_url: str = Field(
        default="http://localhost:8000",
        description="Base URL used by the HTTP notification gateway",
        min_length=1,
    )
    notifications_http_timeout: float = Field(
        default=10.0,
        description="Timeout in seconds for notification gateway requests",
        gt=0,
    )

    @field_validator("notifications_api_url", mode="after")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.strip().rstrip("/")


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["USER_HEADER", "Settings", "get_settings", "reset_settings_cache"]
