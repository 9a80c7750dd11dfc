"""
Configuration module for userstream.

This module provides centralized configuration management using Pydantic settings.
All configuration values can be overridden via environment variables or .env file.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings.

    All settings can be configured via environment variables.
    Settings are validated on instantiation to ensure correct configuration.

    Attributes:
        SERVICE_NAME: Name used in log records
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        LOG_JSON: Render logs as JSON instead of console format
        FAKE_API_DELAY_SECONDS: Artificial latency of the simulated backend
        DEMO_PUBLISH_INTERVAL_SECONDS: Pause between published users in the demo
    """

    SERVICE_NAME: str = Field(
        default="userstream",
        description="Name used in log records",
    )

    # Logging configuration
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    LOG_JSON: bool = Field(
        default=False,
        description="Render logs as JSON",
    )

    # Simulated backend
    FAKE_API_DELAY_SECONDS: float = Field(
        default=2.0,
        gt=0,
        description="Fixed artificial latency of the simulated backend in seconds",
    )

    DEMO_PUBLISH_INTERVAL_SECONDS: float = Field(
        default=1.0,
        ge=0,
        description="Pause between users published by the demo entry point",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Return the global settings instance."""
    return settings
