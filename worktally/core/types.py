# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Value types shared by the time-accounting engine."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date
from enum import Enum


def normalize_tags(tags: Iterable[str]) -> tuple[str, ...]:
    """Return tags sorted and without duplicates."""
    return tuple(sorted(set(tags)))


class DayPortion(str, Enum):
    """How much of a working day a day off covers."""

    FULL = "full"
    HALF = "half"

    @property
    def severity(self) -> int:
        """Rank used when merging calendars; FULL outranks HALF."""
        return _SEVERITY[self]

    @property
    def weight(self) -> float:
        """Days counted against a yearly allowance."""
        return 1.0 if self is DayPortion.FULL else 0.5

    @property
    def fraction(self) -> float:
        """Share of the weekday's working time a day off removes."""
        return 1.0 if self is DayPortion.FULL else 0.5


_SEVERITY = {DayPortion.FULL: 2, DayPortion.HALF: 1}


@dataclass(frozen=True)
class Frame:
    """A closed work interval.

    Times are epoch seconds. Tags are normalized on construction so two
    frames with the same labels in a different order compare equal.
    """

    start_time: int
    end_time: int
    project: str
    tags: tuple[str, ...] = ()
    updated_at: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", normalize_tags(self.tags))

    @property
    def duration(self) -> int:
        """Length of the frame in seconds."""
        return self.end_time - self.start_time


@dataclass(frozen=True)
class CurrentFrame:
    """The in-progress frame while tracking is active."""

    project: str
    start_time: int
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", normalize_tags(self.tags))


@dataclass(frozen=True)
class Period:
    """A reporting window ``[start, end]`` in epoch seconds."""

    start: int
    end: int

    @property
    def is_empty(self) -> bool:
        """A period whose start lies after its end covers nothing."""
        return self.start > self.end


@dataclass(frozen=True)
class DayOffEntry:
    """One entry of a vacation, holiday or sick-day calendar."""

    description: str
    portion: DayPortion = DayPortion.FULL


DayOffCalendar = dict[date, DayOffEntry]


@dataclass
class ProjectDuration:
    """Tracked seconds for one project, with per-tag totals."""

    duration: int = 0
    tags: dict[str, int] = field(default_factory=dict)


@dataclass
class Report:
    """Aggregated durations over a list of frames."""

    total: int = 0
    projects: dict[str, ProjectDuration] = field(default_factory=dict)
