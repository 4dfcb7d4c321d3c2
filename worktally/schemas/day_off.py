# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Vacation, holiday and sick-day schemas."""

import datetime

from pydantic import BaseModel, ConfigDict, Field

from worktally.models.enums import DayOffKind, DayPortion


class DayOffCreate(BaseModel):
    """Schema for adding a day off."""

    date: datetime.date
    description: str | None = Field(None, min_length=1, max_length=200)
    portion: DayPortion = DayPortion.FULL


class DayOffUpdate(BaseModel):
    """Schema for editing a day off."""

    description: str | None = Field(None, min_length=1, max_length=200)
    portion: DayPortion | None = None


class DayOffResponse(BaseModel):
    """Schema for day off responses."""

    model_config = ConfigDict(from_attributes=True)

    kind: DayOffKind
    date: datetime.date
    description: str
    portion: DayPortion


class HolidayImportRequest(BaseModel):
    """Request schema for importing public holidays."""

    country_code: str = Field(..., min_length=2, max_length=3)
    year: int = Field(..., ge=1900, le=2200)
    subdiv: str | None = None
    portion: DayPortion = DayPortion.FULL


class HolidayImportResponse(BaseModel):
    """Holidays added by an import."""

    imported: list[DayOffResponse]
    skipped: list[datetime.date] = []
