"""Environment-based settings configuration.

Resolved once when a command starts and passed down explicitly; nothing below
the CLI reads the environment.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATA_FILE = Path("userdata.json")
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def normalize_log_level(value: str) -> str:
    level = value.strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")
    return level


class EnvironmentSettings(BaseSettings):
    """Settings that come from environment variables and .env files."""

    # Storage
    user_data_file: Path = Field(
        default=DEFAULT_DATA_FILE, validation_alias="USER_DATA_FILE"
    )

    # Logging
    log_level: str = Field(default="WARNING", validation_alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        return normalize_log_level(value)

    def with_overrides(
        self, user_data_file: Path | None = None, log_level: str | None = None
    ) -> EnvironmentSettings:
        """Return a copy with command-line overrides applied."""
        update: dict[str, object] = {}
        if user_data_file is not None:
            update["user_data_file"] = user_data_file
        if log_level is not None:
            update["log_level"] = normalize_log_level(log_level)
        return self.model_copy(update=update)
