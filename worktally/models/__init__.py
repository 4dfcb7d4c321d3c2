# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Database models package."""

from worktally.models.base import Base, TimestampMixin
from worktally.models.day_off import DayOff
from worktally.models.enums import AllowanceKind, DayOffKind, DayPortion
from worktally.models.frame import FrameRecord, TrackingState
from worktally.models.settings import WEEKDAYS, Allowance, WorkingHours

__all__ = [
    "WEEKDAYS",
    "Allowance",
    "AllowanceKind",
    "Base",
    "DayOff",
    "DayOffKind",
    "DayPortion",
    "FrameRecord",
    "TimestampMixin",
    "TrackingState",
    "WorkingHours",
]
