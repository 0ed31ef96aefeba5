"""Environment configuration and validation.

This module defines strongly-typed application settings loaded from environment variables
(optionally via a local `.env` file).
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Telegram rejects messages longer than this many characters.
TELEGRAM_MESSAGE_LIMIT = 4096


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    telegram_bot_token: str = Field(alias="TELEGRAM_BOT_TOKEN")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    seed_file: Path | None = Field(default=None, alias="SEED_FILE")
    reply_max_chars: int = Field(
        default=TELEGRAM_MESSAGE_LIMIT,
        ge=1,
        le=TELEGRAM_MESSAGE_LIMIT,
        alias="REPLY_MAX_CHARS",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accept only level names known to the `logging` module (case-insensitive)."""

        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown LOG_LEVEL: {value}")
        return level

    @field_validator("seed_file")
    @classmethod
    def validate_seed_file_exists(cls, value: Path | None) -> Path | None:
        if value is not None and not value.is_file():
            raise ValueError(f"SEED_FILE does not exist: {value}")
        return value


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Raises:
        RuntimeError: If the environment configuration is missing or invalid.
    """

    try:
        return Settings()
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc
