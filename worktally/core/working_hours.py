# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Expected working time from a weekly template and day-off calendars."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, fields
from datetime import date, timedelta, timezone, tzinfo

from .days_off import merge_day_offs
from .period import to_local_date
from .types import DayOffEntry, DayPortion, Period

logger = logging.getLogger(__name__)

EIGHT_HOURS = timedelta(hours=8)


@dataclass(frozen=True)
class WeeklyTemplate:
    """Expected working duration for each weekday."""

    monday: timedelta = EIGHT_HOURS
    tuesday: timedelta = EIGHT_HOURS
    wednesday: timedelta = EIGHT_HOURS
    thursday: timedelta = EIGHT_HOURS
    friday: timedelta = EIGHT_HOURS
    saturday: timedelta = timedelta(0)
    sunday: timedelta = timedelta(0)

    def __post_init__(self) -> None:
        for day in fields(self):
            if getattr(self, day.name) < timedelta(0):
                raise ValueError(f"Working hours for {day.name} must not be negative")

    @property
    def weekly_total(self) -> timedelta:
        """Sum of all seven weekdays."""
        return sum((getattr(self, day.name) for day in fields(self)), timedelta(0))

    def for_weekday(self, weekday: int) -> timedelta:
        """Return the duration for a weekday number (Monday is 0)."""
        return getattr(self, fields(self)[weekday].name)

    def for_date(self, day: date) -> timedelta:
        """Return the duration for the weekday of ``day``."""
        return self.for_weekday(day.weekday())


def _trailing_days_duration(
    remainder_days: int, end_date: date, template: WeeklyTemplate
) -> timedelta:
    total = timedelta(0)
    for offset in range(remainder_days):
        total += template.for_date(end_date - timedelta(days=offset))
    return total


def _subtract_day_offs(
    total: timedelta, day_offs: Mapping[date, DayPortion], template: WeeklyTemplate
) -> timedelta:
    for day, portion in day_offs.items():
        daily = template.for_date(day)
        subtract = daily * portion.fraction
        total = total - subtract if total >= subtract else timedelta(0)
    return total


def expected_duration(
    period: Period,
    template: WeeklyTemplate,
    vacations: Mapping[date, DayOffEntry],
    holidays: Mapping[date, DayOffEntry],
    sick_days: Mapping[date, DayOffEntry],
    tz: tzinfo = timezone.utc,
) -> int:
    """Compute the expected working seconds for a period.

    Both ends count as whole local days. Complete weeks contribute the
    weekly total; the remaining days are taken from the end of the range,
    so a partial final week uses its actual trailing weekdays. Days off
    then reduce the total by their portion of the weekday's duration,
    never below zero.

    Args:
        period: The resolved reporting period.
        template: Expected duration per weekday.
        vacations: Vacation calendar.
        holidays: Holiday calendar.
        sick_days: Sick-day calendar.
        tz: The configured local time zone.

    Returns:
        Expected working time in whole seconds. 0 for an empty period.
    """
    if period.is_empty:
        return 0

    start_date = to_local_date(period.start, tz)
    end_date = to_local_date(period.end, tz)

    days = (end_date - start_date).days + 1
    full_weeks, remainder_days = divmod(days, 7)

    total = template.weekly_total * full_weeks
    total += _trailing_days_duration(remainder_days, end_date, template)

    day_offs = merge_day_offs(vacations, holidays, sick_days, start_date, end_date)
    total = _subtract_day_offs(total, day_offs, template)

    logger.debug(
        f"Expected {total} from {start_date} to {end_date} "
        f"({full_weeks} weeks, {remainder_days} days, {len(day_offs)} days off)"
    )
    return total // timedelta(seconds=1)
