"""
Configuration management for Maze Chase.
Uses pydantic-settings for environment variable parsing.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings
from pydantic import Field

from maze_chase.gameplay.constants import TICK_MS, CHASER_CADENCE


class Settings(BaseSettings):
    """Application settings loaded from MAZE_CHASE_* environment variables."""

    # Simulation
    tick_ms: int = Field(
        default=TICK_MS,
        gt=0,
        description="Wall-clock duration of one simulation tick in milliseconds"
    )
    chaser_cadence: int = Field(
        default=CHASER_CADENCE,
        ge=1,
        description="Chasers move on every Nth tick"
    )

    # Layout
    layout_path: Optional[str] = Field(
        default=None,
        description="Path to a maze layout file. Empty means the built-in maze"
    )

    # Display
    window_title: str = Field(default="Maze Chase")
    cell_px: int = Field(
        default=24,
        gt=0,
        description="Size of one character cell in pixels"
    )
    font_name: str = Field(
        default="monospace",
        description="System font used to draw glyphs"
    )

    # Logging
    log_level: str = Field(default="INFO")

    class Config:
        env_prefix = "MAZE_CHASE_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
