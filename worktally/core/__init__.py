# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Time-accounting engine.

Pure functions over in-memory values: period resolution, frame clipping,
expected working time, aggregation and allowance accounting.
"""

from .days_off import (
    AllowanceBalance,
    AllowanceTable,
    allowance_remaining,
    count_days,
    merge_day_offs,
)
from .durations import format_duration, parse_duration
from .frames import close_current_frame, filter_frames
from .period import (
    InvalidPeriodError,
    PeriodSelector,
    resolve_period,
    validate_explicit_period,
)
from .report import aggregate, total_duration
from .types import (
    CurrentFrame,
    DayOffEntry,
    DayPortion,
    Frame,
    Period,
    ProjectDuration,
    Report,
)
from .working_hours import WeeklyTemplate, expected_duration

__all__ = [
    "AllowanceBalance",
    "AllowanceTable",
    "CurrentFrame",
    "DayOffEntry",
    "DayPortion",
    "Frame",
    "InvalidPeriodError",
    "Period",
    "PeriodSelector",
    "ProjectDuration",
    "Report",
    "WeeklyTemplate",
    "aggregate",
    "allowance_remaining",
    "close_current_frame",
    "count_days",
    "expected_duration",
    "filter_frames",
    "format_duration",
    "merge_day_offs",
    "parse_duration",
    "resolve_period",
    "total_duration",
    "validate_explicit_period",
]
