# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Day-off calendar merging and yearly allowance accounting."""

from bisect import bisect_right
from collections.abc import Mapping
from datetime import date
from typing import NamedTuple

from .types import DayOffEntry, DayPortion


class AllowanceBalance(NamedTuple):
    """Allowed, taken and remaining days for one year."""

    allowed: int
    taken: float
    remaining: float


class AllowanceTable:
    """Yearly allowances keyed by the first year they apply to.

    The allowance for a year is the value of the latest key not after that
    year, or 0 when every key lies in the future.
    """

    def __init__(self, days_by_year: Mapping[int, int] | None = None) -> None:
        """Initialize the table.

        Args:
            days_by_year: Mapping of effective-from year to allowed days.
        """
        self._days_by_year = dict(days_by_year or {})
        self._years = sorted(self._days_by_year)

    def allowed(self, year: int) -> int:
        """Return the allowance that applies to ``year``."""
        index = bisect_right(self._years, year)
        if index == 0:
            return 0
        return self._days_by_year[self._years[index - 1]]

    def as_dict(self) -> dict[int, int]:
        """Return the table as a year-ordered dict."""
        return {year: self._days_by_year[year] for year in self._years}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AllowanceTable):
            return NotImplemented
        return self._days_by_year == other._days_by_year

    def __repr__(self) -> str:
        return f"AllowanceTable({self.as_dict()!r})"


def _insert_or_upgrade(
    merged: dict[date, DayPortion], day: date, portion: DayPortion
) -> None:
    existing = merged.get(day)
    if existing is None or portion.severity > existing.severity:
        merged[day] = portion


def merge_day_offs(
    vacations: Mapping[date, DayOffEntry],
    holidays: Mapping[date, DayOffEntry],
    sick_days: Mapping[date, DayOffEntry],
    start_date: date,
    end_date: date,
) -> dict[date, DayPortion]:
    """Combine the three calendars into one portion per date.

    Only dates within ``[start_date, end_date]`` are considered. A date
    listed in several calendars keeps the most severe portion, so it
    reduces expected hours only once.

    Args:
        vacations: Vacation calendar.
        holidays: Holiday calendar.
        sick_days: Sick-day calendar.
        start_date: First date of the range (inclusive).
        end_date: Last date of the range (inclusive).

    Returns:
        Mapping of date to merged portion, in date order.
    """
    merged: dict[date, DayPortion] = {}

    for calendar in (vacations, holidays, sick_days):
        for day, entry in calendar.items():
            if start_date <= day <= end_date:
                _insert_or_upgrade(merged, day, entry.portion)

    return dict(sorted(merged.items()))


def count_days(entries: Mapping[date, DayOffEntry], year: int) -> float:
    """Sum the portion weights of the entries falling in ``year``."""
    return sum(
        (entry.portion.weight for day, entry in entries.items() if day.year == year),
        0.0,
    )


def _normalize_zero(value: float) -> float:
    # Maps -0.0 to 0.0
    return value if value != 0 else 0.0


def allowance_remaining(
    table: AllowanceTable,
    entries: Mapping[date, DayOffEntry],
    year: int,
) -> AllowanceBalance:
    """Compute allowed, taken and remaining days for a year.

    Remaining is not clamped: a negative value shows the allowance has been
    exceeded.

    Args:
        table: The applicable allowance table.
        entries: Vacation or sick-day calendar.
        year: The year to account for.

    Returns:
        The allowance balance.
    """
    allowed = table.allowed(year)
    taken = count_days(entries, year)
    return AllowanceBalance(
        allowed=allowed,
        taken=_normalize_zero(taken),
        remaining=_normalize_zero(allowed - taken),
    )
