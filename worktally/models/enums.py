# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Enumeration types for database models."""

from enum import Enum

from worktally.core.types import DayPortion


class DayOffKind(str, Enum):
    """Which day-off calendar an entry belongs to."""

    VACATION = "vacation"
    HOLIDAY = "holiday"
    SICK = "sick"


class AllowanceKind(str, Enum):
    """Which yearly allowance a rule configures."""

    VACATION = "vacation"
    SICK = "sick"


__all__ = ["AllowanceKind", "DayOffKind", "DayPortion"]
