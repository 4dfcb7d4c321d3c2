# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Frame and tracking state models."""

from sqlalchemy import JSON, BigInteger, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from worktally.core.types import CurrentFrame, Frame
from worktally.models.base import Base, TimestampMixin


class FrameRecord(Base, TimestampMixin):
    """A recorded work interval.

    Start, end and update times are epoch seconds so arithmetic on them is
    exact to the second.
    """

    __tablename__ = "frames"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    start_time: Mapped[int] = mapped_column(BigInteger, nullable=False)
    end_time: Mapped[int] = mapped_column(BigInteger, nullable=False)
    project: Mapped[str] = mapped_column(String(200), nullable=False)
    tags: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    last_modified: Mapped[int] = mapped_column(BigInteger, nullable=False)

    __table_args__ = (
        Index("idx_frames_start_time", "start_time"),
        Index("idx_frames_project", "project"),
    )

    def to_frame(self) -> Frame:
        """Convert to the engine's frame value."""
        return Frame(
            start_time=self.start_time,
            end_time=self.end_time,
            project=self.project,
            tags=tuple(self.tags or ()),
            updated_at=self.last_modified,
        )

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<FrameRecord(id={self.id}, project={self.project!r}, "
            f"start={self.start_time}, end={self.end_time})>"
        )


class TrackingState(Base, TimestampMixin):
    """The in-progress frame. At most one row exists."""

    __tablename__ = "tracking_state"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    project: Mapped[str] = mapped_column(String(200), nullable=False)
    tags: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    start_time: Mapped[int] = mapped_column(BigInteger, nullable=False)

    def to_current_frame(self) -> CurrentFrame:
        """Convert to the engine's in-progress frame value."""
        return CurrentFrame(
            project=self.project,
            start_time=self.start_time,
            tags=tuple(self.tags or ()),
        )

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<TrackingState(project={self.project!r}, start={self.start_time})>"
