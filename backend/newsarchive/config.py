"""
Application configuration with environment variable support.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings, read from the environment and an optional .env file."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Storage layout
    SNAPSHOT_DIR: Path = Path("public/archive")
    ASSET_DIR: Path = Path("public")
    CURRENT_SNAPSHOT_FILE: Path = Path("public/news-data.json")

    # Deployment path prefix for public URLs, e.g. "/ai-report".
    # Only affects generated links, never the storage lookup.
    BASE_PATH: str = ""

    # CORS Configuration
    CORS_ALLOW_ORIGINS: list[str] = ["*"]

    # Logging Configuration
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    PORT: int = 8000


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
