"""Application settings loaded from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Configuration
    ENVIRONMENT: Literal["development", "test", "staging", "production"] = "development"
    DEBUG: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./trustgate.db"
    DATABASE_POOL_SIZE: int = 5
    DATABASE_MAX_OVERFLOW: int = 10

    # Screening provider selection
    use_checkr: bool = False
    """Opt-in switch for the Checkr provider. The mock provider is the default."""

    checkr_api_key: SecretStr | None = None
    checkr_base_url: str = "https://api.checkr.com/v1"

    provider_timeout_seconds: float | None = Field(default=None, gt=0)
    """Upper bound for a single provider call. None waits indefinitely."""


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
