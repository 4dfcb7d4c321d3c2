# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Working hours and allowance models."""

from datetime import timedelta

from sqlalchemy import Enum, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from worktally.core.working_hours import WeeklyTemplate
from worktally.models.base import Base, TimestampMixin
from worktally.models.enums import AllowanceKind

WEEKDAYS = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)

EIGHT_HOURS = 8 * 3600


class WorkingHours(Base, TimestampMixin):
    """Expected working seconds per weekday. At most one row exists."""

    __tablename__ = "working_hours"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    monday: Mapped[int] = mapped_column(Integer, default=EIGHT_HOURS, nullable=False)
    tuesday: Mapped[int] = mapped_column(Integer, default=EIGHT_HOURS, nullable=False)
    wednesday: Mapped[int] = mapped_column(Integer, default=EIGHT_HOURS, nullable=False)
    thursday: Mapped[int] = mapped_column(Integer, default=EIGHT_HOURS, nullable=False)
    friday: Mapped[int] = mapped_column(Integer, default=EIGHT_HOURS, nullable=False)
    saturday: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    sunday: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    def to_template(self) -> WeeklyTemplate:
        """Convert to the engine's weekly template."""
        return WeeklyTemplate(
            **{day: timedelta(seconds=getattr(self, day)) for day in WEEKDAYS}
        )

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<WorkingHours(id={self.id})>"


class Allowance(Base, TimestampMixin):
    """Yearly vacation or sick-day allowance, effective from a year on."""

    __tablename__ = "allowances"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    kind: Mapped[AllowanceKind] = mapped_column(Enum(AllowanceKind), nullable=False)
    from_year: Mapped[int] = mapped_column(Integer, nullable=False)
    days: Mapped[int] = mapped_column(Integer, nullable=False)

    __table_args__ = (
        UniqueConstraint("kind", "from_year", name="uq_allowances_kind_year"),
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<Allowance(kind={self.kind.value}, from_year={self.from_year}, "
            f"days={self.days})>"
        )
