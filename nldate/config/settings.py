"""Environment configuration and validation.

This module defines strongly-typed settings loaded from environment variables (optionally via a
local `.env` file). The parser core is a pure function and takes no settings; configuration only
drives the command line entry point.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    reference_now: datetime | None = Field(default=None, alias="NLDATE_NOW")
    display_offset_hours: int = Field(default=0, ge=-14, le=14, alias="NLDATE_DISPLAY_OFFSET")

    @field_validator("reference_now")
    @classmethod
    def validate_reference_now_is_aware(cls, value: datetime | None) -> datetime | None:
        """Validate that a pinned reference instant carries a UTC offset.

        A naive instant would make relative expressions depend on the host timezone.
        """

        if value is not None and value.tzinfo is None:
            raise ValueError("NLDATE_NOW must include a UTC offset (e.g. 2025-01-15T10:00:00+00:00)")
        return value

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        """Upper-case the log level name (`debug` -> `DEBUG`)."""

        return value.strip().upper()


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Raises:
        RuntimeError: If the environment configuration is invalid.
    """

    try:
        return Settings()
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc
