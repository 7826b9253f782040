"""
Runtime settings for the CLI and API, read from the environment.

A `.env` file in the working directory is loaded by load_environment().
Settings are re-read on every call to get_settings() so tests and
long-running servers always see the current environment.
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import AmountTranslationError

ENV_PREFIX = "AMOUNT_TRANSLATOR_"


class Settings(BaseModel):
    """Environment-driven configuration."""

    log_level: str = "WARNING"
    max_batch: int = Field(default=100, ge=1)  # Max amounts per /translate/batch call

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level


def load_environment() -> None:
    """Load a .env file into os.environ without overriding existing variables."""
    load_dotenv()


def get_settings() -> Settings:
    """Build Settings from AMOUNT_TRANSLATOR_* environment variables.

    Raises:
        AmountTranslationError: With code INVALID_CONFIG when a variable is
            present but malformed.
    """
    raw: dict[str, str] = {}
    for field_name in Settings.model_fields:
        value = os.environ.get(f"{ENV_PREFIX}{field_name.upper()}")
        if value is not None:
            raw[field_name] = value

    try:
        return Settings(**raw)
    except ValidationError as exc:
        raise AmountTranslationError(
            "INVALID_CONFIG",
            f"Invalid {ENV_PREFIX}* configuration: {exc.error_count()} error(s)",
            details={"errors": [err["msg"] for err in exc.errors()]},
        ) from exc
