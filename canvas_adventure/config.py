"""
Configuration management for Canvas Adventure.
Uses pydantic-settings for environment variable parsing.
"""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings
from pydantic import Field

from canvas_adventure.gameplay.constants import (
    FIELD_WIDTH, FIELD_HEIGHT, PLAYER_SIZE, HISTORY_KEY, HISTORY_LIMIT
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Play field
    field_width: int = Field(
        default=FIELD_WIDTH,
        ge=PLAYER_SIZE,
        description="Play field width in pixels"
    )
    field_height: int = Field(
        default=FIELD_HEIGHT,
        ge=PLAYER_SIZE,
        description="Play field height in pixels"
    )

    # Loop
    fps: int = Field(
        default=60,
        ge=1,
        description="Target frame rate; one gameplay tick per frame"
    )

    # History
    history_file: Path = Field(
        default=Path.home() / ".canvas_adventure" / "history.json",
        description="File backing the persisted history store"
    )
    history_key: str = Field(
        default=HISTORY_KEY,
        description="Store key holding the serialized history list"
    )
    history_limit: int = Field(
        default=HISTORY_LIMIT,
        ge=1,
        description="Number of most recent runs kept in the history"
    )

    # Logging
    log_level: str = Field(default="INFO")

    class Config:
        env_prefix = "CANVAS_ADVENTURE_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
