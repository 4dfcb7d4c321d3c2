# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""API dependencies for dependency injection."""

import time
from collections.abc import Generator
from datetime import datetime, tzinfo

from sqlalchemy.orm import Session

from worktally.config import settings
from worktally.database import SessionLocal


def get_db() -> Generator[Session]:
    """Get database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_now() -> int:
    """Sample the current instant once for the whole request."""
    return int(time.time())


def get_tz() -> tzinfo:
    """Get the configured local time zone."""
    return settings.tzinfo


def to_timestamp(value: datetime | None, tz: tzinfo) -> int | None:
    """Convert a request datetime to epoch seconds.

    Naive values are read as local time in ``tz``.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=tz)
    return int(value.timestamp())
