# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for tracking_service."""

import pytest

from worktally.models import FrameRecord
from worktally.services import frame_service, tracking_service


class TestStart:
    """Tests for starting a frame."""

    def test_start_sets_current_frame(self, db_session):
        """Starting records the in-progress frame."""
        current, stopped = tracking_service.start(db_session, "work", ["b", "a"], now=100)

        assert stopped is None
        assert current.project == "work"
        assert current.start_time == 100
        assert current.tags == ("a", "b")
        assert tracking_service.get_current_frame(db_session) == current

    def test_start_stops_running_frame(self, db_session):
        """Starting while tracking closes the running frame at now."""
        tracking_service.start(db_session, "first", [], now=100)
        current, stopped = tracking_service.start(db_session, "second", [], now=250)

        assert stopped.project == "first"
        assert (stopped.start_time, stopped.end_time) == (100, 250)
        assert current.project == "second"
        assert db_session.query(FrameRecord).count() == 1

    def test_start_at(self, db_session, add_frames):
        """An explicit start time is used."""
        add_frames((100, 200, "old", ()))
        current, _ = tracking_service.start(db_session, "work", [], now=500, at=300)
        assert current.start_time == 300

    def test_start_at_before_last_frame_rejected(self, db_session, add_frames):
        """The start cannot lie before the end of the last frame."""
        add_frames((100, 200, "old", ()))
        with pytest.raises(ValueError, match="before the end of the last frame"):
            tracking_service.start(db_session, "work", [], now=500, at=150)

    def test_no_gap_starts_at_last_end(self, db_session, add_frames):
        """no_gap continues where the last frame ended."""
        add_frames((100, 200, "old", ()))
        current, _ = tracking_service.start(db_session, "work", [], now=500, no_gap=True)
        assert current.start_time == 200

    def test_no_gap_without_frames_starts_now(self, db_session):
        """no_gap falls back to now when nothing was recorded."""
        current, _ = tracking_service.start(db_session, "work", [], now=500, no_gap=True)
        assert current.start_time == 500

    def test_at_and_no_gap_exclusive(self, db_session):
        """at and no_gap cannot be combined."""
        with pytest.raises(ValueError, match="together"):
            tracking_service.start(db_session, "work", [], now=500, at=400, no_gap=True)

    def test_at_and_no_gap_keep_running_frame(self, db_session):
        """A rejected start leaves the running frame alone."""
        tracking_service.start(db_session, "first", [], now=100)
        with pytest.raises(ValueError):
            tracking_service.start(db_session, "second", [], now=500, at=400, no_gap=True)
        assert tracking_service.get_current_frame(db_session).project == "first"


class TestStop:
    """Tests for stopping a frame."""

    def test_stop_records_frame(self, db_session):
        """Stopping stores a closed frame."""
        tracking_service.start(db_session, "work", ["x"], now=100)
        frame = tracking_service.stop(db_session, now=400)

        assert (frame.start_time, frame.end_time, frame.tags) == (100, 400, ("x",))
        assert tracking_service.get_current_frame(db_session) is None
        assert frame_service.get_frames(db_session) == [frame]

    def test_stop_at(self, db_session):
        """An explicit end time is used."""
        tracking_service.start(db_session, "work", [], now=100)
        frame = tracking_service.stop(db_session, now=400, at=300)
        assert frame.end_time == 300

    def test_stop_at_not_after_start_rejected(self, db_session):
        """The end must lie after the start."""
        tracking_service.start(db_session, "work", [], now=100)
        with pytest.raises(ValueError, match="before start time"):
            tracking_service.stop(db_session, now=400, at=100)

    def test_stop_without_tracking(self, db_session):
        """Nothing to stop."""
        with pytest.raises(ValueError, match="No project started"):
            tracking_service.stop(db_session, now=400)


class TestRestartAndCancel:
    """Tests for restarting and cancelling."""

    def test_restart_uses_last_frame(self, db_session, add_frames):
        """Restart picks up project and tags of the last frame."""
        add_frames((100, 200, "old", ("a",)), (300, 400, "new", ("b", "c")))
        current = tracking_service.restart(db_session, now=500)
        assert (current.project, current.tags, current.start_time) == ("new", ("b", "c"), 500)

    def test_restart_no_gap(self, db_session, add_frames):
        """Restart with no_gap starts at the last end."""
        add_frames((100, 200, "old", ()))
        current = tracking_service.restart(db_session, now=500, no_gap=True)
        assert current.start_time == 200

    def test_restart_while_running(self, db_session, add_frames):
        """Restart is rejected while tracking."""
        add_frames((100, 200, "old", ()))
        tracking_service.start(db_session, "work", [], now=300)
        with pytest.raises(ValueError, match="already in progress"):
            tracking_service.restart(db_session, now=500)

    def test_restart_without_frames(self, db_session):
        """Restart needs a previous frame."""
        with pytest.raises(ValueError, match="No previous project"):
            tracking_service.restart(db_session, now=500)

    def test_cancel(self, db_session):
        """Cancel discards without recording."""
        tracking_service.start(db_session, "work", [], now=100)
        cancelled = tracking_service.cancel(db_session)

        assert cancelled.project == "work"
        assert tracking_service.get_current_frame(db_session) is None
        assert frame_service.get_frames(db_session) == []

    def test_cancel_without_tracking(self, db_session):
        """Nothing to cancel."""
        with pytest.raises(ValueError, match="No project started"):
            tracking_service.cancel(db_session)
