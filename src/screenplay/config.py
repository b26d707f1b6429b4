"""Library configuration using pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from SCREENPLAY_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SCREENPLAY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Defaults for clients built by CallAnApi.at()
    api_timeout_seconds: float = 2.0
    api_accept_header: str = "application/json,application/xml"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
