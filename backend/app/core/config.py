"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.logging import LogLevel

APP_VERSION = "0.1.0"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_env: str = Field(default="development")
    debug: bool = Field(default=False)
    log_level: LogLevel = Field(default="INFO")

    # Email syntax options passed to email-validator
    email_allow_quoted_local: bool = Field(default=False)
    email_allow_domain_literal: bool = Field(default=False)

    # Address list parsing (0 disables the limit)
    max_batch_size: int = Field(default=100, ge=0)

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
