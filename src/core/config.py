"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking into
  the CLI.
- Only ambient knobs live here. The target range is part of the game protocol
  and deliberately not configurable.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class AppSettings(BaseSettings):
    """Central application settings.

    Environment only: the game reads no configuration file.
    """

    model_config = SettingsConfigDict(
        env_prefix="GUESS_GAME_",
        extra="ignore",
        case_sensitive=False,
    )

    log_level: LogLevel = Field(
        default="WARNING",
        description="Level for the project loggers (diagnostics go to stderr).",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional file that receives a copy of the log records.",
    )
    reveal_target: bool = Field(
        default=False,
        description="Debug aid: print the target after every missed guess.",
    )
