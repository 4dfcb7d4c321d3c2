# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Resolve reporting period selectors into concrete instants."""

from collections.abc import Sequence
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from enum import Enum

from .types import Frame, Period


class PeriodSelector(str, Enum):
    """Calendar-relative periods ending at the current instant."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class InvalidPeriodError(ValueError):
    """Raised when an explicit period does not end after it starts."""


def to_local_date(timestamp: int, tz: tzinfo) -> date:
    """Return the calendar date of an epoch timestamp in ``tz``."""
    return datetime.fromtimestamp(timestamp, tz).date()


def local_midnight(day: date, tz: tzinfo) -> int:
    """Return the epoch timestamp of midnight on ``day`` in ``tz``.

    Ambiguous and skipped wall times use ``fold=0``, i.e. the UTC offset in
    effect before the clock change.
    """
    return int(datetime.combine(day, time(0, 0), tzinfo=tz).timestamp())


def validate_explicit_period(start: int | None, end: int | None) -> None:
    """Reject an explicit period whose end is not after its start.

    Raises:
        InvalidPeriodError: If both bounds are given and ``start >= end``.
    """
    if start is not None and end is not None and start >= end:
        raise InvalidPeriodError("'to' must be after 'from'")


def _selector_start(selector: PeriodSelector, today: date) -> date:
    if selector is PeriodSelector.DAY:
        return today
    if selector is PeriodSelector.WEEK:
        return today - timedelta(days=today.weekday())
    if selector is PeriodSelector.MONTH:
        return today.replace(day=1)
    return today.replace(month=1, day=1)


def resolve_period(
    selector: PeriodSelector | None,
    now: int,
    frames: Sequence[Frame],
    tz: tzinfo = timezone.utc,
    start: int | None = None,
    end: int | None = None,
) -> Period:
    """Turn a period selector into a ``Period``.

    With a selector the period runs from local midnight at the beginning of
    the current day, week (Monday), month or year up to ``now``. Without
    one, explicit bounds are used; a missing start falls back to the
    earliest recorded frame (or the epoch), a missing end to ``now``.

    Args:
        selector: Calendar-relative selector, or None for explicit bounds.
        now: The current instant, sampled once by the caller.
        frames: Recorded frames, including a closed in-progress frame.
        tz: The configured local time zone.
        start: Explicit start instant.
        end: Explicit end instant.

    Returns:
        The resolved period. It may be empty (start after end).
    """
    if selector is None:
        if start is None:
            start = min((f.start_time for f in frames), default=0)
        return Period(start=start, end=now if end is None else end)

    today = to_local_date(now, tz)
    return Period(start=local_midnight(_selector_start(selector, today), tz), end=now)
