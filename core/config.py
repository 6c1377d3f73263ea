"""
Application configuration using Pydantic Settings.

Typed and validated settings for the Seller Center adapter, loaded from
environment variables and an optional .env file.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal
from urllib.parse import urlparse

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.countries import OPERATOR_CODES


class DatabaseSettings(BaseSettings):
    """Database connection settings."""

    model_config = SettingsConfigDict(env_prefix="DB_")

    # DATABASE_URL wins over the individual parameters
    url: str | None = Field(
        default=None,
        alias="DATABASE_URL",
        description="Full database URL (takes precedence over individual params)",
    )

    name: str = Field(default="falabella_seller_center", description="Database name")
    user: str = Field(default="postgres", description="Database user")
    password: SecretStr = Field(default=SecretStr("postgres"), description="Database password")
    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=5432, description="Database port", ge=1, le=65535)

    @property
    def connection_url(self) -> str:
        """Get database connection URL."""
        if self.url:
            return self.url
        return (
            f"postgresql://{self.user}:{self.password.get_secret_value()}"
            f"@{self.host}:{self.port}/{self.name}"
        )

    @property
    def safe_url(self) -> str:
        """Get database URL without password for logging."""
        if self.url:
            parsed = urlparse(self.url)
            if parsed.password:
                return self.url.replace(f":{parsed.password}@", ":***@")
            return self.url
        return f"postgresql://{self.user}@{self.host}:{self.port}/{self.name}"


class FalabellaSettings(BaseSettings):
    """Falabella Seller Center credentials and client options."""

    model_config = SettingsConfigDict(env_prefix="FALABELLA_")

    username: str = Field(default="", description="Seller Center user (e-mail)")
    api_key: SecretStr = Field(default=SecretStr(""), description="Seller Center API key")
    country: str = Field(default="CHL", description="ISO-3 country code of the storefront")
    seller_id: str | None = Field(default=None, description="Seller Center seller id")
    custom_log_calls: bool = Field(
        default=False,
        description="Log one line per Seller Center call on the falabella.calls channel",
    )
    integrator: str = Field(default="PROPIA", description="Integration type sent in User-Agent")
    timeout: float = Field(default=30.0, description="Request timeout in seconds", gt=0)

    @field_validator("country")
    @classmethod
    def validate_country(cls, v: str) -> str:
        """Reject country codes without a known operator."""
        country = v.strip().upper()
        if country not in OPERATOR_CODES:
            msg = f"Invalid country: {v}. Must be one of {list(OPERATOR_CODES)}"
            raise ValueError(msg)
        return country

    @property
    def is_configured(self) -> bool:
        """Check if Seller Center credentials are configured."""
        return bool(self.username and self.api_key.get_secret_value())


class Settings(BaseSettings):
    """
    Main application settings.

    Aggregates all configuration sections.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    debug: bool = Field(default=False, description="Debug mode")
    secret_key: SecretStr = Field(
        default=SecretStr("django-insecure-change-me-in-production"),
        description="Django secret key",
    )
    log_level: str = Field(default="INFO", description="Minimum log level")
    json_logs: bool = Field(default=False, description="Render logs as JSON")

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    falabella: FalabellaSettings = Field(default_factory=FalabellaSettings)

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Upper-case and validate the log level name."""
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            msg = f"Invalid log level: {v}"
            raise ValueError(msg)
        return level

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_test(self) -> bool:
        """Check if running in test environment."""
        return self.environment == "test"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    Returns:
        Configured Settings instance.
    """
    return Settings()
