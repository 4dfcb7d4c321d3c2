# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Aggregate frame durations per project and tag."""

from collections.abc import Iterable

from .types import Frame, ProjectDuration, Report


def total_duration(frames: Iterable[Frame]) -> int:
    """Sum the durations of ``frames`` in seconds."""
    return sum(frame.duration for frame in frames)


def aggregate(frames: Iterable[Frame]) -> Report:
    """Sum frame durations into per-project and per-tag totals.

    A frame contributes its full duration to every one of its tags, so tag
    totals may add up to more than the project total.
    """
    report = Report()

    for frame in frames:
        duration = frame.duration
        report.total += duration

        project = report.projects.setdefault(frame.project, ProjectDuration())
        project.duration += duration

        for tag in frame.tags:
            project.tags[tag] = project.tags.get(tag, 0) + duration

    return report
