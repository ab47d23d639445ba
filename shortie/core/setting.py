"""
Configuration Settings

This module defines application configuration using Pydantic Settings.
All configuration is loaded from environment variables or .env file.

Design Decisions:
- Uses pydantic-settings for type-safe configuration
- Empty variables fall back to defaults (PORT="" behaves like unset)
- BASE_URL defaults to the local listening address when not provided
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["Settings", "settings"]


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables or .env file.
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_ignore_empty=True,
        extra="ignore"
    )

    # Server Configuration
    HOST: str = Field(
        default="0.0.0.0",
        description="Address the HTTP server binds to"
    )
    PORT: int = Field(
        default=8080,
        ge=1,
        le=65535,
        description="Port the HTTP server listens on"
    )

    # Application Configuration
    BASE_URL: Optional[str] = Field(
        default=None,
        description="Base URL for generating short URLs (defaults to http://localhost:<PORT>)"
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    # Short Code Configuration
    SHORT_CODE_LENGTH: int = Field(
        default=7,
        ge=1,
        description="Fixed length for all generated short codes"
    )
    MAX_COLLISION_ATTEMPTS: int = Field(
        default=5,
        ge=1,
        description="Candidate codes drawn before giving up on a shorten request"
    )

    @model_validator(mode="after")
    def _default_base_url(self) -> "Settings":
        if not self.BASE_URL:
            self.BASE_URL = f"http://localhost:{self.PORT}"
        return self


settings = Settings()
