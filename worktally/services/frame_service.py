# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Frame service for listing frames and managing projects and tags."""

import logging

from sqlalchemy.orm import Session

from worktally.core.types import Frame, normalize_tags
from worktally.models import FrameRecord, TrackingState

logger = logging.getLogger(__name__)


def get_frame_records(db: Session) -> list[FrameRecord]:
    """Get all frame rows in chronological order."""
    return (
        db.query(FrameRecord)
        .order_by(FrameRecord.start_time, FrameRecord.id)
        .all()
    )


def get_frames(db: Session) -> list[Frame]:
    """Get all frames as engine values, in chronological order."""
    return [record.to_frame() for record in get_frame_records(db)]


def get_last_frame(db: Session) -> FrameRecord | None:
    """Get the most recently started frame."""
    return (
        db.query(FrameRecord)
        .order_by(FrameRecord.start_time.desc(), FrameRecord.id.desc())
        .first()
    )


def add_frame(db: Session, frame: Frame) -> FrameRecord:
    """Persist a closed frame."""
    record = FrameRecord(
        start_time=frame.start_time,
        end_time=frame.end_time,
        project=frame.project,
        tags=list(frame.tags),
        last_modified=frame.updated_at,
    )
    db.add(record)
    db.commit()
    db.refresh(record)
    return record


def list_projects(db: Session) -> list[str]:
    """Get the sorted names of all projects with recorded frames."""
    rows = db.query(FrameRecord.project).distinct().all()
    return sorted(project for (project,) in rows)


def list_tags(db: Session) -> list[str]:
    """Get the sorted names of all tags used on recorded frames."""
    tags: set[str] = set()
    for (frame_tags,) in db.query(FrameRecord.tags).all():
        tags.update(frame_tags or ())
    return sorted(tags)


def rename_project(db: Session, old_name: str, new_name: str, now: int) -> int:
    """Rename a project on all frames and on the in-progress frame.

    Args:
        db: Database session.
        old_name: Current project name.
        new_name: New project name.
        now: Current instant, stored as the frames' update time.

    Returns:
        Number of frames changed.

    Raises:
        ValueError: If no frame or in-progress frame uses the project.
    """
    records = db.query(FrameRecord).filter(FrameRecord.project == old_name).all()
    state = db.query(TrackingState).filter(TrackingState.project == old_name).first()

    if not records and state is None:
        raise ValueError(f"Project '{old_name}' not found")

    for record in records:
        record.project = new_name
        record.last_modified = now
    if state is not None:
        state.project = new_name

    db.commit()
    logger.info(f"Renamed project '{old_name}' to '{new_name}' on {len(records)} frames")
    return len(records)


def _frames_with_tag(db: Session, tag: str) -> list[FrameRecord]:
    return [record for record in get_frame_records(db) if tag in (record.tags or ())]


def rename_tag(db: Session, old_name: str, new_name: str, now: int) -> int:
    """Rename a tag on all frames.

    A frame that already carries ``new_name`` ends up with it once.

    Raises:
        ValueError: If no frame carries the tag.
    """
    records = _frames_with_tag(db, old_name)
    if not records:
        raise ValueError(f"Tag '{old_name}' not found")

    for record in records:
        renamed = [new_name if tag == old_name else tag for tag in record.tags]
        record.tags = list(normalize_tags(renamed))
        record.last_modified = now

    db.commit()
    logger.info(f"Renamed tag '{old_name}' to '{new_name}' on {len(records)} frames")
    return len(records)


def remove_tag(db: Session, tag: str, now: int) -> int:
    """Remove a tag from all frames.

    Returns:
        Number of frames changed.
    """
    records = _frames_with_tag(db, tag)
    for record in records:
        record.tags = [t for t in record.tags if t != tag]
        record.last_modified = now

    db.commit()
    logger.info(f"Removed tag '{tag}' from {len(records)} frames")
    return len(records)
