"""Configuration management for the Dog CEO client."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://dog.ceo/api/"


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DOGCEO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Remote API
    base_url: str = DEFAULT_BASE_URL

    # HTTP
    http_timeout_seconds: float = Field(default=30.0, gt=0)
    user_agent: str = Field(default="dogceo-python/0.1", min_length=1)

    # Logging
    log_level: str = "INFO"

    @field_validator("base_url")
    @classmethod
    def _ensure_trailing_slash(cls, value: str) -> str:
        value = value.strip()
        return value if value.endswith("/") else value + "/"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
