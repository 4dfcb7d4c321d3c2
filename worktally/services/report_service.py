# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Report service combining stored data with the time-accounting engine."""

import logging
from dataclasses import dataclass
from datetime import tzinfo

from sqlalchemy.orm import Session

from worktally.core.days_off import AllowanceBalance, allowance_remaining
from worktally.core.frames import close_current_frame, filter_frames
from worktally.core.period import PeriodSelector, resolve_period, validate_explicit_period
from worktally.core.report import aggregate, total_duration
from worktally.core.types import Frame, Period, Report
from worktally.core.working_hours import expected_duration
from worktally.models import AllowanceKind, DayOffKind
from worktally.services import (
    day_off_service,
    frame_service,
    settings_service,
    tracking_service,
)

logger = logging.getLogger(__name__)


@dataclass
class PeriodQuery:
    """What a report or balance should cover.

    Either a selector or explicit bounds; bounds are epoch seconds.
    """

    selector: PeriodSelector | None = None
    start: int | None = None
    end: int | None = None
    project: str | None = None
    tag: str | None = None


@dataclass
class Balance:
    """Expected against actual working seconds for a period."""

    expected: int
    actual: int
    period: Period

    @property
    def remaining(self) -> int:
        """Seconds still to be worked; negative means overtime."""
        return self.expected - self.actual


@dataclass
class DaysOffSummary:
    """Vacation and sick-day allowances for one year."""

    year: int
    vacation: AllowanceBalance
    sick: AllowanceBalance


def _frames_until(db: Session, now: int) -> list[Frame]:
    frames = frame_service.get_frames(db)
    current = tracking_service.get_current_frame(db)
    if current is not None:
        frames.append(close_current_frame(current, now))
    return frames


def _resolve(
    db: Session, query: PeriodQuery, now: int, tz: tzinfo
) -> tuple[Period, list[Frame]]:
    validate_explicit_period(query.start, query.end)
    frames = _frames_until(db, now)
    period = resolve_period(
        query.selector, now, frames, tz, start=query.start, end=query.end
    )
    logger.debug(f"Resolved period {period.start}..{period.end} for {query}")
    return period, frames


def build_report(
    db: Session, query: PeriodQuery, now: int, tz: tzinfo
) -> tuple[Period, Report]:
    """Compute time spent per project and tag.

    Args:
        db: Database session.
        query: Period and filters.
        now: Current instant, sampled once per request.
        tz: The configured local time zone.

    Returns:
        The resolved period and the aggregated report.

    Raises:
        InvalidPeriodError: If explicit bounds do not form a valid period.
    """
    period, frames = _resolve(db, query, now, tz)
    selected = filter_frames(frames, period, project=query.project, tag=query.tag)
    return period, aggregate(selected)


def build_balance(
    db: Session, query: PeriodQuery, now: int, tz: tzinfo
) -> Balance:
    """Compare expected and actual working time for a period.

    Project and tag filters of the query are ignored.

    Raises:
        InvalidPeriodError: If explicit bounds do not form a valid period.
    """
    period, frames = _resolve(db, query, now, tz)
    if period.is_empty:
        return Balance(expected=0, actual=0, period=period)

    actual = total_duration(filter_frames(frames, period))
    expected = expected_duration(
        period,
        settings_service.get_working_hours(db),
        day_off_service.get_calendar(db, DayOffKind.VACATION),
        day_off_service.get_calendar(db, DayOffKind.HOLIDAY),
        day_off_service.get_calendar(db, DayOffKind.SICK),
        tz,
    )
    return Balance(expected=expected, actual=actual, period=period)


def build_days_off_summary(db: Session, year: int) -> DaysOffSummary:
    """Compute allowed, taken and remaining vacation and sick days."""
    return DaysOffSummary(
        year=year,
        vacation=allowance_remaining(
            settings_service.get_allowance_table(db, AllowanceKind.VACATION),
            day_off_service.get_calendar(db, DayOffKind.VACATION),
            year,
        ),
        sick=allowance_remaining(
            settings_service.get_allowance_table(db, AllowanceKind.SICK),
            day_off_service.get_calendar(db, DayOffKind.SICK),
            year,
        ),
    )
