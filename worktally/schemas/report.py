# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Report, balance and days-off summary schemas."""

from pydantic import BaseModel, ConfigDict, Field


class TimespanResponse(BaseModel):
    """The resolved reporting period in epoch seconds."""

    model_config = ConfigDict(populate_by_name=True)

    from_: int = Field(..., alias="from")
    to: int


class ProjectDurationResponse(BaseModel):
    """Tracked seconds for one project."""

    duration: int
    tags: dict[str, int] = {}


class ActivityReportResponse(BaseModel):
    """Time spent per project and tag."""

    projects: dict[str, ProjectDurationResponse]
    total_duration: int
    timespan: TimespanResponse


class BalanceResponse(BaseModel):
    """Expected against actual working time."""

    expected_working_seconds: int
    actual_working_seconds: int
    remaining_working_seconds: int
    timespan: TimespanResponse


class DaysOffSummaryResponse(BaseModel):
    """Allowed, taken and remaining vacation and sick days."""

    year: int
    vacation_days_allowed: int
    vacation_days_taken: float
    vacation_days_remaining: float
    sick_days_allowed: int
    sick_days_taken: float
    sick_days_remaining: float
