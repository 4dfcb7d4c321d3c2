# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Application settings loaded from the environment."""

import os
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, field_validator


class Settings(BaseModel):
    """Process-level settings."""

    database_url: str = "sqlite:///./worktally.db"
    timezone: str = "UTC"
    log_level: str = "INFO"

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate that the time zone is known to zoneinfo."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown time zone: {v}") from e
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the log level name."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {v}")
        return level

    @property
    def tzinfo(self) -> ZoneInfo:
        """The configured local time zone."""
        return ZoneInfo(self.timezone)

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from ``WORKTALLY_*`` environment variables."""
        values = {
            name: os.environ[f"WORKTALLY_{name.upper()}"]
            for name in cls.model_fields
            if f"WORKTALLY_{name.upper()}" in os.environ
        }
        return cls(**values)


settings = Settings.from_env()
