"""Environment configuration and validation.

This module defines strongly-typed settings loaded from environment variables (optionally via a
local `.env` file). The helpers themselves are pure functions; settings only shape the command-line
surface (log level, default validation limits, output formatting).
"""

from __future__ import annotations

import logging

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVEL_NAMES = frozenset(logging.getLevelNamesMapping())


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    validation_max_length: int | None = Field(default=None, ge=0, alias="VALIDATION_MAX_LENGTH")
    output_indent: int = Field(default=2, ge=0, le=8, alias="OUTPUT_INDENT")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that the log level is one of the standard `logging` level names."""

        normalized = value.strip().upper()
        if normalized not in _LOG_LEVEL_NAMES:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(_LOG_LEVEL_NAMES)}")
        return normalized


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Raises:
        RuntimeError: If the environment configuration is invalid.
    """

    try:
        return Settings()
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc
