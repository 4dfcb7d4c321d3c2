# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tracking service for the in-progress frame lifecycle."""

import logging
from collections.abc import Sequence

from sqlalchemy.orm import Session

from worktally.core.frames import close_current_frame
from worktally.core.types import CurrentFrame, Frame
from worktally.models import TrackingState
from worktally.services import frame_service

logger = logging.getLogger(__name__)

STATE_ID = 1


def _get_state(db: Session) -> TrackingState | None:
    return db.query(TrackingState).filter(TrackingState.id == STATE_ID).first()


def get_current_frame(db: Session) -> CurrentFrame | None:
    """Get the in-progress frame, if tracking is active."""
    state = _get_state(db)
    return state.to_current_frame() if state else None


def _resolve_start_time(
    db: Session, now: int, at: int | None, no_gap: bool
) -> int:
    if at is not None and no_gap:
        raise ValueError("Cannot use 'at' and 'no_gap' together")

    if at is None and not no_gap:
        return now

    last = frame_service.get_last_frame(db)
    last_end = last.end_time if last else None

    if at is not None:
        if last_end is not None and at < last_end:
            raise ValueError(
                f"Start time ({at}) is before the end of the last frame ({last_end})"
            )
        return at

    return last_end if last_end is not None else now


def _begin(
    db: Session, project: str, tags: Sequence[str], start_time: int
) -> CurrentFrame:
    current = CurrentFrame(project=project, start_time=start_time, tags=tuple(tags))
    db.add(
        TrackingState(
            id=STATE_ID,
            project=current.project,
            tags=list(current.tags),
            start_time=current.start_time,
        )
    )
    db.commit()
    logger.info(f"Started project '{project}' at {start_time}")
    return current


def _finish(db: Session, state: TrackingState, end_time: int) -> Frame:
    frame = close_current_frame(state.to_current_frame(), end_time)
    db.delete(state)
    frame_service.add_frame(db, frame)
    logger.info(f"Stopped project '{frame.project}' at {end_time}")
    return frame


def start(
    db: Session,
    project: str,
    tags: Sequence[str],
    now: int,
    at: int | None = None,
    no_gap: bool = False,
) -> tuple[CurrentFrame, Frame | None]:
    """Start tracking a project, stopping the running frame first.

    Args:
        db: Database session.
        project: Project name.
        tags: Tags for the new frame.
        now: Current instant.
        at: Explicit start instant.
        no_gap: Start where the last frame ended.

    Returns:
        The new in-progress frame and the frame that was stopped, if any.

    Raises:
        ValueError: If ``at`` and ``no_gap`` are combined or ``at`` lies
            before the end of the last frame.
    """
    if at is not None and no_gap:
        raise ValueError("Cannot use 'at' and 'no_gap' together")

    stopped = None
    state = _get_state(db)
    if state is not None:
        stopped = _finish(db, state, now)

    start_time = _resolve_start_time(db, now, at, no_gap)
    return _begin(db, project, tags, start_time), stopped


def stop(db: Session, now: int, at: int | None = None) -> Frame:
    """Stop the in-progress frame and record it.

    Raises:
        ValueError: If nothing is being tracked or ``at`` is not after the
            frame's start.
    """
    state = _get_state(db)
    if state is None:
        raise ValueError("No project started")

    end_time = now if at is None else at
    if at is not None and at <= state.start_time:
        raise ValueError(
            f"End time ({at}) is before start time ({state.start_time})"
        )

    return _finish(db, state, end_time)


def restart(
    db: Session, now: int, at: int | None = None, no_gap: bool = False
) -> CurrentFrame:
    """Start tracking the project and tags of the last frame again.

    Raises:
        ValueError: If tracking is active or no frame was recorded yet.
    """
    state = _get_state(db)
    if state is not None:
        raise ValueError(f"The project '{state.project}' is already in progress")

    last = frame_service.get_last_frame(db)
    if last is None:
        raise ValueError("No previous project found to be restarted")

    start_time = _resolve_start_time(db, now, at, no_gap)
    return _begin(db, last.project, last.tags or (), start_time)


def cancel(db: Session) -> CurrentFrame:
    """Discard the in-progress frame without recording it.

    Raises:
        ValueError: If nothing is being tracked.
    """
    state = _get_state(db)
    if state is None:
        raise ValueError("No project started")

    current = state.to_current_frame()
    db.delete(state)
    db.commit()
    logger.info(f"Cancelled project '{current.project}'")
    return current
