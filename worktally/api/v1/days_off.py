# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Vacation, holiday and sick-day API endpoints."""

import datetime

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from worktally.api.deps import get_db
from worktally.models import DayOffKind
from worktally.schemas.day_off import (
    DayOffCreate,
    DayOffResponse,
    DayOffUpdate,
    HolidayImportRequest,
    HolidayImportResponse,
)
from worktally.services import day_off_service

router = APIRouter()


@router.post(
    "/holiday/import",
    response_model=HolidayImportResponse,
    status_code=status.HTTP_201_CREATED,
)
def import_public_holidays(
    data: HolidayImportRequest,
    db: Session = Depends(get_db),
) -> HolidayImportResponse:
    """Add a country's public holidays to the holiday calendar."""
    try:
        added, skipped = day_off_service.import_public_holidays(
            db, data.country_code, data.year, data.subdiv, data.portion
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    return HolidayImportResponse(
        imported=[DayOffResponse.model_validate(d) for d in added],
        skipped=skipped,
    )


@router.get("/{kind}", response_model=list[DayOffResponse])
def list_days_off(
    kind: DayOffKind,
    year: int | None = None,
    db: Session = Depends(get_db),
) -> list[DayOffResponse]:
    """List the entries of a calendar."""
    entries = day_off_service.list_days_off(db, kind, year)
    return [DayOffResponse.model_validate(e) for e in entries]


@router.post(
    "/{kind}",
    response_model=DayOffResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_day_off(
    kind: DayOffKind,
    data: DayOffCreate,
    db: Session = Depends(get_db),
) -> DayOffResponse:
    """Add a date to a calendar."""
    try:
        entry = day_off_service.add_day_off(db, kind, data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        ) from e
    return DayOffResponse.model_validate(entry)


@router.put("/{kind}/{day}", response_model=DayOffResponse)
def edit_day_off(
    kind: DayOffKind,
    day: datetime.date,
    data: DayOffUpdate,
    db: Session = Depends(get_db),
) -> DayOffResponse:
    """Edit the description or portion of an entry."""
    try:
        entry = day_off_service.edit_day_off(db, kind, day, data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e
    return DayOffResponse.model_validate(entry)


@router.delete("/{kind}/{day}", response_model=DayOffResponse)
def remove_day_off(
    kind: DayOffKind,
    day: datetime.date,
    db: Session = Depends(get_db),
) -> DayOffResponse:
    """Remove an entry from a calendar."""
    entry = day_off_service.get_day_off(db, kind, day)
    if not entry:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No {kind.value} day found on {day}",
        )

    response = DayOffResponse.model_validate(entry)
    day_off_service.remove_day_off(db, kind, day)
    return response
