# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Frame clipping and filtering."""

from collections.abc import Iterable
from dataclasses import replace

from .types import CurrentFrame, Frame, Period


def close_current_frame(current: CurrentFrame, now: int) -> Frame:
    """Turn the in-progress frame into a closed frame ending at ``now``."""
    return Frame(
        start_time=current.start_time,
        end_time=now,
        project=current.project,
        tags=current.tags,
        updated_at=now,
    )


def filter_by_start_time(frames: Iterable[Frame], start: int) -> list[Frame]:
    """Drop frames starting before ``start``, clipping those that cross it."""
    result: list[Frame] = []
    for frame in frames:
        if frame.start_time < start < frame.end_time:
            result.append(replace(frame, start_time=start))
        elif frame.start_time >= start:
            result.append(frame)
    return result


def filter_by_end_time(frames: Iterable[Frame], end: int) -> list[Frame]:
    """Drop frames ending after ``end``, clipping those that cross it."""
    result: list[Frame] = []
    for frame in frames:
        if frame.start_time < end < frame.end_time:
            result.append(replace(frame, end_time=end))
        elif frame.end_time <= end:
            result.append(frame)
    return result


def filter_by_project(frames: Iterable[Frame], project: str) -> list[Frame]:
    """Keep frames recorded for exactly ``project``."""
    return [frame for frame in frames if frame.project == project]


def filter_by_tag(frames: Iterable[Frame], tag: str) -> list[Frame]:
    """Keep frames carrying ``tag``."""
    return [frame for frame in frames if tag in frame.tags]


def filter_frames(
    frames: Iterable[Frame],
    period: Period,
    project: str | None = None,
    tag: str | None = None,
) -> list[Frame]:
    """Clip frames to a period and apply the optional project and tag filters.

    The input is left untouched; clipped frames are new values. An empty
    period yields no frames.

    Args:
        frames: Frames to filter.
        period: The reporting window.
        project: Only keep frames of this project.
        tag: Only keep frames carrying this tag.

    Returns:
        The frames overlapping the period, clipped to its bounds.
    """
    if period.is_empty:
        return []

    result = filter_by_end_time(filter_by_start_time(frames, period.start), period.end)

    if project is not None:
        result = filter_by_project(result, project)
    if tag is not None:
        result = filter_by_tag(result, tag)

    return result
