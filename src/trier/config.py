"""
Configuration settings for trier.

All settings are loaded from environment variables prefixed with ``TRIER_``
(e.g. ``TRIER_DEFAULT_INTERVAL_MS=250``), with sensible defaults.
A ``.env`` file is honoured for local development.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TRIER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Logging ===
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"  # "production" switches to JSON logs

    # === Retry defaults ===
    DEFAULT_INTERVAL_MS: int = Field(default=500, ge=0)  # pause between attempts
    DEFAULT_ATTEMPTS: int = Field(default=3, ge=1)  # used by CounterBasedTrier.times()

    # === Monitoring ===
    METRICS_ENABLED: bool = True


# Global settings instance
settings = Settings()
