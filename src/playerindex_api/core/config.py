"""
Configuration management for The Player Index NBA API.

Uses Pydantic settings for type-safe configuration with environment variable support.
All settings can be overridden via environment variables.
"""

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    The upstream credential is read once, at process start, and handed to the
    BallDontLie client explicitly. Nothing else reads it from the environment.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ==========================================================================
    # Application Metadata
    # ==========================================================================
    app_name: str = "theplayerindex-nba-api"
    app_version: str = "1.0.0"
    log_level: str = Field(default="INFO", description="Root log level")

    # ==========================================================================
    # Server Configuration
    # ==========================================================================
    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)

    # ==========================================================================
    # CORS Configuration
    # ==========================================================================
    cors_allow_origins: list[str] = Field(
        default=["*"],
        description="Allowed CORS origins. Any origin by default.",
    )
    cors_allow_methods: list[str] = ["GET", "HEAD", "OPTIONS"]

    # ==========================================================================
    # BallDontLie Upstream
    # ==========================================================================
    balldontlie_api_key: Optional[str] = Field(
        default=None,
        description="BallDontLie API key, sent as a bearer token",
    )
    balldontlie_base_url: str = "https://api.balldontlie.io/v1"
    upstream_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Timeout in seconds for a single upstream call",
    )

    # Season used by /season-averages when the caller omits one
    default_season: int = 2024

    @computed_field
    @property
    def is_upstream_configured(self) -> bool:
        """Whether an upstream credential is available."""
        return bool(self.balldontlie_api_key)

    def setup_logging(self) -> None:
        """Configure logging based on settings."""
        logging.basicConfig(
            level=getattr(logging, self.log_level.upper(), logging.INFO),
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
