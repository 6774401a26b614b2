"""
Settings using pydantic-settings for type-safe configuration.

Every setting can come from a CROSSING_* environment variable or a .env
file; command-line arguments take precedence over both.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "WARNING", "ERROR")


class Settings(BaseSettings):
    """Settings loaded from the environment, with defaults for local runs."""

    model_config = SettingsConfigDict(
        env_prefix="CROSSING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    input_path: Path | None = Field(
        default=None,
        description="Participant document to use when none is given on the command line",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level: TRACE, DEBUG, INFO, WARNING or ERROR",
    )
    moves_output: Path | None = Field(
        default=None,
        description="Where to save the JSON move log, if anywhere",
    )

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize log_level."""
        v = v.upper()
        if v not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid CROSSING_LOG_LEVEL: {v}. Must be one of {', '.join(VALID_LOG_LEVELS)}")
        return v


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are loaded once per process. Tests that change the environment
    should call ``get_settings.cache_clear()``.
    """
    return Settings()
