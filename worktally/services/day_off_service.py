# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Day-off service for the vacation, holiday and sick-day calendars."""

import logging
from datetime import date

import holidays
from sqlalchemy import extract
from sqlalchemy.orm import Session

from worktally.core.types import DayOffCalendar
from worktally.models import DayOff, DayOffKind, DayPortion
from worktally.schemas.day_off import DayOffCreate, DayOffUpdate

logger = logging.getLogger(__name__)

DEFAULT_DESCRIPTIONS = {
    DayOffKind.VACATION: "Vacation",
    DayOffKind.HOLIDAY: "Holiday",
    DayOffKind.SICK: "Sick",
}


def get_day_off(db: Session, kind: DayOffKind, day: date) -> DayOff | None:
    """Get the entry for a date in one calendar."""
    return (
        db.query(DayOff)
        .filter(DayOff.kind == kind, DayOff.date == day)
        .first()
    )


def list_days_off(
    db: Session, kind: DayOffKind, year: int | None = None
) -> list[DayOff]:
    """List the entries of one calendar in date order, optionally for a year."""
    query = db.query(DayOff).filter(DayOff.kind == kind)
    if year is not None:
        query = query.filter(extract("year", DayOff.date) == year)
    return query.order_by(DayOff.date).all()


def get_calendar(db: Session, kind: DayOffKind) -> DayOffCalendar:
    """Get one calendar as a date-keyed mapping for the engine."""
    return {entry.date: entry.to_entry() for entry in list_days_off(db, kind)}


def add_day_off(db: Session, kind: DayOffKind, data: DayOffCreate) -> DayOff:
    """Add a date to a calendar.

    Raises:
        ValueError: If the calendar already has an entry on that date.
    """
    if get_day_off(db, kind, data.date) is not None:
        raise ValueError(f"A {kind.value} day already exists on {data.date}")

    entry = DayOff(
        kind=kind,
        date=data.date,
        description=data.description or DEFAULT_DESCRIPTIONS[kind],
        portion=data.portion,
    )
    db.add(entry)
    db.commit()
    db.refresh(entry)
    logger.info(f"Added {kind.value} day on {data.date} ({data.portion.value})")
    return entry


def edit_day_off(
    db: Session, kind: DayOffKind, day: date, data: DayOffUpdate
) -> DayOff:
    """Change the description or portion of an existing entry.

    Raises:
        ValueError: If the calendar has no entry on that date.
    """
    entry = get_day_off(db, kind, day)
    if entry is None:
        raise ValueError(f"No {kind.value} day exists on {day}")

    if data.description is not None:
        entry.description = data.description
    if data.portion is not None:
        entry.portion = data.portion

    db.commit()
    db.refresh(entry)
    return entry


def remove_day_off(db: Session, kind: DayOffKind, day: date) -> DayOff:
    """Remove the entry on a date.

    Returns:
        The removed entry.

    Raises:
        ValueError: If the calendar has no entry on that date.
    """
    entry = get_day_off(db, kind, day)
    if entry is None:
        raise ValueError(f"No {kind.value} day found on {day}")

    db.delete(entry)
    db.commit()
    logger.info(f"Removed {kind.value} day on {day}")
    return entry


def import_public_holidays(
    db: Session,
    country_code: str,
    year: int,
    subdiv: str | None = None,
    portion: DayPortion = DayPortion.FULL,
) -> tuple[list[DayOff], list[date]]:
    """Fill the holiday calendar with a country's public holidays.

    Dates already present in the holiday calendar are left untouched.

    Args:
        db: Database session.
        country_code: ISO 3166 country code, e.g. "AT".
        year: The year to import.
        subdiv: Optional state or region code.
        portion: Portion to record for each holiday.

    Returns:
        The added entries and the dates that were skipped.

    Raises:
        ValueError: If the country or subdivision is not supported.
    """
    try:
        public = holidays.country_holidays(country_code.upper(), subdiv=subdiv, years=year)
    except NotImplementedError as e:
        raise ValueError(f"Unsupported country: {country_code}") from e

    added: list[DayOff] = []
    skipped: list[date] = []

    for day, name in sorted(public.items()):
        if get_day_off(db, DayOffKind.HOLIDAY, day) is not None:
            skipped.append(day)
            continue
        entry = DayOff(kind=DayOffKind.HOLIDAY, date=day, description=name, portion=portion)
        db.add(entry)
        added.append(entry)

    db.commit()
    for entry in added:
        db.refresh(entry)

    logger.info(
        f"Imported {len(added)} public holidays for {country_code.upper()} {year} "
        f"({len(skipped)} skipped)"
    )
    return added, skipped
