"""
FFM — Library Configuration

Loads logging configuration from environment variables (and an optional .env
file) using Pydantic Settings.  A cached ``get_settings()`` helper is provided
so that every call-site receives the same validated instance without
re-parsing the environment.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration for the FFM library."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ------------------------------------------------------------------ #
    # Logging
    # ------------------------------------------------------------------ #
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True  # False renders human-readable console output

    # ------------------------------------------------------------------ #
    # Derived helpers
    # ------------------------------------------------------------------ #
    @property
    def log_level_number(self) -> int:
        """Return LOG_LEVEL as the numeric level used by the logging setup."""
        return logging.getLevelName(self.LOG_LEVEL)

    @field_validator("LOG_LEVEL")
    @classmethod
    def _log_level_must_be_known(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"):
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached, validated ``Settings`` instance.

    Import this function anywhere you need access to configuration::

        from ffm.config import get_settings
        settings = get_settings()
    """
    return Settings()
