"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    database_url: str = "sqlite:///fitness.db"
    host: str = "0.0.0.0"  # noqa: S104
    port: int = 3000
    stats_timezone: str = "UTC"
    profile_range_check: bool = False
    log_level: str = "INFO"
    openai_api_key: str | None = None
    openai_model: str = "gpt-5.2"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
