# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Working hours and allowance schemas."""

from datetime import timedelta

from pydantic import BaseModel, Field, field_validator

from worktally.core.durations import format_duration, parse_duration
from worktally.core.working_hours import WeeklyTemplate
from worktally.models.enums import AllowanceKind
from worktally.models.settings import WEEKDAYS


def _parse_human_duration(v: object) -> object:
    # ISO 8601 strings and numbers are left to pydantic
    if isinstance(v, str) and not v.strip().upper().lstrip("-").startswith("P"):
        return parse_duration(v)
    return v


class WorkingHoursUpdate(BaseModel):
    """Schema for updating some weekdays."""

    monday: timedelta | None = None
    tuesday: timedelta | None = None
    wednesday: timedelta | None = None
    thursday: timedelta | None = None
    friday: timedelta | None = None
    saturday: timedelta | None = None
    sunday: timedelta | None = None

    @field_validator(*WEEKDAYS, mode="before")
    @classmethod
    def parse_human_duration(cls, v: object) -> object:
        """Parse human-readable durations such as ``"7h 30m"``."""
        if v is None:
            return v
        return _parse_human_duration(v)

    @field_validator(*WEEKDAYS)
    @classmethod
    def check_not_negative(cls, v: timedelta | None) -> timedelta | None:
        """Reject negative working hours."""
        if v is not None and v < timedelta(0):
            raise ValueError("Working hours must not be negative")
        return v


class WorkingHoursResponse(BaseModel):
    """Working hours in seconds and as readable text."""

    seconds: dict[str, int]
    display: dict[str, str]
    weekly_total_seconds: int

    @classmethod
    def from_template(cls, template: WeeklyTemplate) -> "WorkingHoursResponse":
        """Build the response from a weekly template."""
        seconds = {
            name: int(getattr(template, name).total_seconds())
            for name in WEEKDAYS
        }
        return cls(
            seconds=seconds,
            display={name: format_duration(value) for name, value in seconds.items()},
            weekly_total_seconds=int(template.weekly_total.total_seconds()),
        )


class AllowanceUpdate(BaseModel):
    """Schema for setting an allowance from a year on."""

    days: int = Field(..., ge=0, le=366)


class AllowanceResponse(BaseModel):
    """All allowance rules of one kind."""

    kind: AllowanceKind
    days_per_year: dict[int, int]
