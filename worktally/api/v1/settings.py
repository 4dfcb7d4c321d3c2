# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Working hours and allowance API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from worktally.api.deps import get_db
from worktally.models import AllowanceKind
from worktally.schemas.settings import (
    AllowanceResponse,
    AllowanceUpdate,
    WorkingHoursResponse,
    WorkingHoursUpdate,
)
from worktally.services import settings_service

router = APIRouter()


@router.get("/working-hours", response_model=WorkingHoursResponse)
def get_working_hours(db: Session = Depends(get_db)) -> WorkingHoursResponse:
    """Get the expected working time per weekday."""
    return WorkingHoursResponse.from_template(settings_service.get_working_hours(db))


@router.put("/working-hours", response_model=WorkingHoursResponse)
def update_working_hours(
    data: WorkingHoursUpdate,
    db: Session = Depends(get_db),
) -> WorkingHoursResponse:
    """Update the expected working time of some weekdays."""
    template = settings_service.update_working_hours(db, data)
    return WorkingHoursResponse.from_template(template)


@router.get("/allowances/{kind}", response_model=AllowanceResponse)
def get_allowances(
    kind: AllowanceKind,
    db: Session = Depends(get_db),
) -> AllowanceResponse:
    """Get the yearly allowance rules."""
    table = settings_service.get_allowance_table(db, kind)
    return AllowanceResponse(kind=kind, days_per_year=table.as_dict())


@router.put("/allowances/{kind}/{from_year}", response_model=AllowanceResponse)
def set_allowance(
    kind: AllowanceKind,
    from_year: int,
    data: AllowanceUpdate,
    db: Session = Depends(get_db),
) -> AllowanceResponse:
    """Set the allowance effective from a year on."""
    table = settings_service.set_allowance(db, kind, from_year, data.days)
    return AllowanceResponse(kind=kind, days_per_year=table.as_dict())


@router.delete("/allowances/{kind}/{from_year}", response_model=AllowanceResponse)
def remove_allowance(
    kind: AllowanceKind,
    from_year: int,
    db: Session = Depends(get_db),
) -> AllowanceResponse:
    """Remove the allowance rule starting in a year."""
    try:
        table = settings_service.remove_allowance(db, kind, from_year)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e
    return AllowanceResponse(kind=kind, days_per_year=table.as_dict())
