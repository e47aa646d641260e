# Copyright (c) 2026 Itameter
# SPDX-License-Identifier: MIT

"""Runtime settings loaded from ITAMETER_* environment variables and .env files."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Itameter settings."""

    # Real-time validation
    debounce_delay_ms: int = Field(
        default=300, ge=0, description="Quiescence delay before real-time validation fires"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Minimum log level")
    log_json: bool = Field(default=False, description="Render log events as JSON")

    model_config = SettingsConfigDict(
        env_prefix="ITAMETER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {v!r}")
        return level

    @property
    def debounce_delay(self) -> float:
        """Debounce delay in seconds."""
        return self.debounce_delay_ms / 1000.0


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
