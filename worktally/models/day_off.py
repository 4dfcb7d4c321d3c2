# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Vacation, holiday and sick-day calendar model."""

import datetime

from sqlalchemy import Date, Enum, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from worktally.core.types import DayOffEntry
from worktally.models.base import Base, TimestampMixin
from worktally.models.enums import DayOffKind, DayPortion


class DayOff(Base, TimestampMixin):
    """One date in one of the day-off calendars."""

    __tablename__ = "days_off"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    kind: Mapped[DayOffKind] = mapped_column(Enum(DayOffKind), nullable=False)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)
    description: Mapped[str] = mapped_column(String(200), nullable=False)
    portion: Mapped[DayPortion] = mapped_column(
        Enum(DayPortion), default=DayPortion.FULL, nullable=False
    )

    __table_args__ = (UniqueConstraint("kind", "date", name="uq_days_off_kind_date"),)

    def to_entry(self) -> DayOffEntry:
        """Convert to the engine's calendar entry."""
        return DayOffEntry(description=self.description, portion=self.portion)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<DayOff(kind={self.kind.value}, date={self.date}, portion={self.portion.value})>"
