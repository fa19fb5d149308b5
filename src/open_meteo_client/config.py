"""
Application settings.

Values come from environment variables prefixed with ``OPEN_METEO_`` (or a
local ``.env`` file), e.g. ``OPEN_METEO_REQUEST_TIMEOUT=10``.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the client and CLI."""

    model_config = SettingsConfigDict(
        env_prefix="OPEN_METEO_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "open-meteo-client"
    app_env: str = "production"
    debug: bool = False
    log_level: str = "WARNING"

    request_timeout: float = Field(default=30.0, gt=0, description="Seconds per HTTP request")
    user_agent: str = "open-meteo-client/0.3 (+https://open-meteo.com/)"


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings (read once)."""
    return Settings()
