# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Settings service for working hours and yearly allowances."""

import logging

from sqlalchemy.orm import Session

from worktally.core.days_off import AllowanceTable
from worktally.core.working_hours import WeeklyTemplate
from worktally.models import WEEKDAYS, Allowance, AllowanceKind, WorkingHours
from worktally.schemas.settings import WorkingHoursUpdate

logger = logging.getLogger(__name__)

WORKING_HOURS_ID = 1
DEFAULT_ALLOWANCES = {2000: 30}


def get_or_create_working_hours(db: Session) -> WorkingHours:
    """Get the working hours row, creating the defaults on first use."""
    row = db.query(WorkingHours).filter(WorkingHours.id == WORKING_HOURS_ID).first()
    if not row:
        row = WorkingHours(id=WORKING_HOURS_ID)
        db.add(row)
        db.commit()
        db.refresh(row)
    return row


def get_working_hours(db: Session) -> WeeklyTemplate:
    """Get the weekly template."""
    return get_or_create_working_hours(db).to_template()


def update_working_hours(db: Session, data: WorkingHoursUpdate) -> WeeklyTemplate:
    """Update the given weekdays and keep the others."""
    row = get_or_create_working_hours(db)

    for day in WEEKDAYS:
        value = getattr(data, day)
        if value is not None:
            setattr(row, day, int(value.total_seconds()))

    db.commit()
    db.refresh(row)
    logger.info("Updated working hours")
    return row.to_template()


def _ensure_defaults(db: Session, kind: AllowanceKind) -> None:
    if db.query(Allowance).filter(Allowance.kind == kind).first():
        return
    for from_year, days in DEFAULT_ALLOWANCES.items():
        db.add(Allowance(kind=kind, from_year=from_year, days=days))
    db.commit()


def get_allowance_table(db: Session, kind: AllowanceKind) -> AllowanceTable:
    """Get the allowance table for vacation or sick days.

    A kind without any rule starts with 30 days per year from 2000 on.
    """
    _ensure_defaults(db, kind)
    rows = db.query(Allowance).filter(Allowance.kind == kind).all()
    return AllowanceTable({row.from_year: row.days for row in rows})


def set_allowance(
    db: Session, kind: AllowanceKind, from_year: int, days: int
) -> AllowanceTable:
    """Set the allowance effective from ``from_year`` on."""
    _ensure_defaults(db, kind)
    row = (
        db.query(Allowance)
        .filter(Allowance.kind == kind, Allowance.from_year == from_year)
        .first()
    )
    if row:
        row.days = days
    else:
        db.add(Allowance(kind=kind, from_year=from_year, days=days))

    db.commit()
    logger.info(f"Set {kind.value} allowance to {days} days from {from_year}")
    return get_allowance_table(db, kind)


def remove_allowance(
    db: Session, kind: AllowanceKind, from_year: int
) -> AllowanceTable:
    """Remove the rule starting at ``from_year``.

    Raises:
        ValueError: If no such rule exists.
    """
    row = (
        db.query(Allowance)
        .filter(Allowance.kind == kind, Allowance.from_year == from_year)
        .first()
    )
    if not row:
        raise ValueError(f"No {kind.value} allowance starts in {from_year}")

    db.delete(row)
    db.commit()
    logger.info(f"Removed {kind.value} allowance starting in {from_year}")
    return AllowanceTable(
        {
            r.from_year: r.days
            for r in db.query(Allowance).filter(Allowance.kind == kind).all()
        }
    )
