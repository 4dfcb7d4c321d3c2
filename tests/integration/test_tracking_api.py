# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for tracking and frame endpoints."""

# Wednesday 2024-01-03 12:00 UTC, matches the client fixture clock
NOW = 1704283200


class TestHealth:
    """Tests for GET /health."""

    def test_health(self, client):
        """Test the health endpoint."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestTrackingEndpoints:
    """Tests for /api/v1/tracking endpoints."""

    def test_status_idle(self, client):
        """Test status without a running frame."""
        response = client.get("/api/v1/tracking")
        assert response.status_code == 200
        assert response.json()["current_frame"] is None

    def test_start_and_stop(self, client):
        """Test a start/stop cycle with an explicit start time."""
        response = client.post(
            "/api/v1/tracking/start",
            json={"project": "work", "tags": ["+docs", "api"], "at": "2024-01-03T10:00:00Z"},
        )
        assert response.status_code == 200
        current = response.json()["current_frame"]
        assert current == {"project": "work", "tags": ["api", "docs"], "start_time": NOW - 7200}

        response = client.get("/api/v1/tracking")
        assert response.json()["current_frame"]["project"] == "work"

        response = client.post("/api/v1/tracking/stop", json={})
        assert response.status_code == 200
        stopped = response.json()["stopped_frame"]
        assert (stopped["start_time"], stopped["end_time"]) == (NOW - 7200, NOW)

        frames = client.get("/api/v1/frames").json()
        assert len(frames) == 1
        assert frames[0]["project"] == "work"

    def test_naive_time_is_local(self, client):
        """Test that a datetime without offset uses the configured zone."""
        response = client.post(
            "/api/v1/tracking/start",
            json={"project": "work", "at": "2024-01-03T11:00:00"},
        )
        assert response.json()["current_frame"]["start_time"] == NOW - 3600

    def test_start_with_at_and_no_gap(self, client):
        """Test that at and no_gap are rejected together."""
        response = client.post(
            "/api/v1/tracking/start",
            json={"project": "work", "at": "2024-01-03T10:00:00Z", "no_gap": True},
        )
        assert response.status_code == 422

    def test_stop_without_tracking(self, client):
        """Test stopping when nothing runs."""
        response = client.post("/api/v1/tracking/stop", json={})
        assert response.status_code == 400
        assert "No project started" in response.json()["detail"]

    def test_restart_and_cancel(self, client, add_frames):
        """Test restarting the last frame and cancelling it."""
        add_frames((NOW - 7200, NOW - 3600, "work", ("x",)))

        response = client.post("/api/v1/tracking/restart", json={"no_gap": True})
        assert response.status_code == 200
        assert response.json()["current_frame"]["start_time"] == NOW - 3600

        response = client.post("/api/v1/tracking/cancel")
        assert response.status_code == 200
        assert response.json()["cancelled_frame"]["project"] == "work"

        response = client.post("/api/v1/tracking/cancel")
        assert response.status_code == 400


class TestProjectAndTagEndpoints:
    """Tests for project and tag endpoints."""

    def test_list_and_rename_project(self, client, add_frames):
        """Test listing and renaming projects."""
        add_frames((100, 200, "old", ("x",)))

        assert client.get("/api/v1/projects").json() == {"names": ["old"]}

        response = client.put("/api/v1/projects/old", json={"new_name": "new"})
        assert response.status_code == 200
        assert client.get("/api/v1/projects").json() == {"names": ["new"]}
        assert client.get("/api/v1/frames").json()[0]["updated_at"] == NOW

    def test_rename_unknown_project(self, client):
        """Test renaming a project that does not exist."""
        response = client.put("/api/v1/projects/missing", json={"new_name": "new"})
        assert response.status_code == 404

    def test_tags(self, client, add_frames):
        """Test renaming and removing tags."""
        add_frames((100, 200, "a", ("x", "y")))

        response = client.put("/api/v1/tags/x", json={"new_name": "z"})
        assert response.status_code == 200
        assert client.get("/api/v1/tags").json() == {"names": ["y", "z"]}

        response = client.delete("/api/v1/tags/y")
        assert response.status_code == 200
        assert client.get("/api/v1/tags").json() == {"names": ["z"]}
