"""
Application Settings Configuration

This module handles all application configuration including the MongoDB
connection, API settings, and logging using environment variables.
"""

import logging
from functools import lru_cache
from typing import List
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application settings
    app_name: str = Field(default="Trainer Repository API")
    debug: bool = Field(default=False)
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)

    # CORS settings
    allowed_origins: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:8080"]
    )

    # MongoDB settings
    mongodb_url: str = Field(default="mongodb://localhost:27017")
    mongodb_database: str = Field(default="dbtrainers")
    mongodb_collection: str = Field(default="trainers")
    mongodb_server_selection_timeout_ms: int = Field(default=5000)
    mongodb_max_pool_size: int = Field(default=10)

    # Repository settings
    find_all_limit: int = Field(default=100_000, gt=0)

    # Logging settings
    log_level: str = Field(default="INFO")
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # Development settings
    skip_db_init: bool = Field(default=False)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings with caching.

    Returns:
        Settings: Cached application settings instance
    """
    return Settings()


def configure_logging(settings: Settings) -> None:
    """
    Configure the root logger from the logging settings.

    Args:
        settings: Application settings providing level and format
    """
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(level=log_level, format=settings.log_format)
