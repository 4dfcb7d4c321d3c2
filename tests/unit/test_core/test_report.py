# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for report aggregation."""

from worktally.core.report import aggregate, total_duration
from worktally.core.types import Frame

HOUR = 3600


def test_aggregate_projects_and_tags():
    frames = [
        Frame(start_time=0, end_time=HOUR, project="A", tags=("x", "y")),
        Frame(start_time=HOUR, end_time=3 * HOUR, project="B", tags=("z",)),
        Frame(start_time=3 * HOUR, end_time=6 * HOUR, project="A", tags=("y",)),
    ]

    report = aggregate(frames)

    assert report.total == 6 * HOUR
    assert report.projects["A"].duration == 4 * HOUR
    assert report.projects["A"].tags == {"x": HOUR, "y": 4 * HOUR}
    assert report.projects["B"].duration == 2 * HOUR
    assert report.projects["B"].tags == {"z": 2 * HOUR}


def test_aggregate_empty():
    report = aggregate([])
    assert report.total == 0
    assert report.projects == {}


def test_total_duration():
    frames = [
        Frame(start_time=10, end_time=20, project="A"),
        Frame(start_time=30, end_time=45, project="B"),
    ]
    assert total_duration(frames) == 25


def test_frame_tags_are_normalized():
    frame = Frame(start_time=0, end_time=1, project="A", tags=("b", "a", "b"))
    assert frame.tags == ("a", "b")
