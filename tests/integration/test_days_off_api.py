# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for day-off and settings endpoints."""


class TestDaysOffEndpoints:
    """Tests for /api/v1/days-off endpoints."""

    def test_add_list_edit_remove(self, client):
        """Test the lifecycle of a vacation day."""
        response = client.post("/api/v1/days-off/vacation", json={"date": "2024-02-01"})
        assert response.status_code == 201
        assert response.json() == {
            "kind": "vacation",
            "date": "2024-02-01",
            "description": "Vacation",
            "portion": "full",
        }

        response = client.put(
            "/api/v1/days-off/vacation/2024-02-01", json={"portion": "half"}
        )
        assert response.status_code == 200
        assert response.json()["portion"] == "half"

        response = client.get("/api/v1/days-off/vacation", params={"year": 2024})
        assert [d["date"] for d in response.json()] == ["2024-02-01"]

        response = client.delete("/api/v1/days-off/vacation/2024-02-01")
        assert response.status_code == 200
        assert client.get("/api/v1/days-off/vacation").json() == []

    def test_duplicate(self, client):
        """Test adding the same date twice."""
        client.post("/api/v1/days-off/sick", json={"date": "2024-02-01"})
        response = client.post("/api/v1/days-off/sick", json={"date": "2024-02-01"})
        assert response.status_code == 409

    def test_unknown_kind(self, client):
        """Test an unknown calendar kind."""
        response = client.get("/api/v1/days-off/weekend")
        assert response.status_code == 422

    def test_missing_entry(self, client):
        """Test editing and removing an unknown date."""
        response = client.put("/api/v1/days-off/holiday/2024-02-01", json={})
        assert response.status_code == 404
        response = client.delete("/api/v1/days-off/holiday/2024-02-01")
        assert response.status_code == 404

    def test_import_holidays(self, client):
        """Test importing public holidays."""
        response = client.post(
            "/api/v1/days-off/holiday/import",
            json={"country_code": "AT", "year": 2024},
        )
        assert response.status_code == 201
        dates = [d["date"] for d in response.json()["imported"]]
        assert "2024-12-25" in dates

    def test_import_unknown_country(self, client):
        """Test importing for an unsupported country."""
        response = client.post(
            "/api/v1/days-off/holiday/import",
            json={"country_code": "XX", "year": 2024},
        )
        assert response.status_code == 400


class TestSettingsEndpoints:
    """Tests for /api/v1/settings endpoints."""

    def test_working_hours(self, client):
        """Test reading and updating working hours."""
        response = client.get("/api/v1/settings/working-hours")
        assert response.status_code == 200
        assert response.json()["weekly_total_seconds"] == 40 * 3600

        response = client.put(
            "/api/v1/settings/working-hours", json={"friday": "4h 30m"}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["seconds"]["friday"] == 4 * 3600 + 1800
        assert data["display"]["friday"] == "4h 30m"

    def test_invalid_working_hours(self, client):
        """Test an unparsable duration."""
        response = client.put("/api/v1/settings/working-hours", json={"monday": "lots"})
        assert response.status_code == 422

    def test_numeric_and_iso_working_hours(self, client):
        """Test seconds as numbers and ISO 8601 durations."""
        response = client.put(
            "/api/v1/settings/working-hours",
            json={"monday": 3600.5, "tuesday": 7200, "wednesday": "PT7H30M"},
        )
        assert response.status_code == 200
        seconds = response.json()["seconds"]
        assert seconds["monday"] == 3600
        assert seconds["tuesday"] == 7200
        assert seconds["wednesday"] == 7 * 3600 + 1800

    def test_negative_working_hours(self, client):
        """Test that negative durations are rejected in every format."""
        for value in (-60, -0.5, "-PT1H"):
            response = client.put(
                "/api/v1/settings/working-hours", json={"friday": value}
            )
            assert response.status_code == 422

    def test_allowances(self, client):
        """Test allowance rules."""
        response = client.get("/api/v1/settings/allowances/vacation")
        assert response.json()["days_per_year"] == {"2000": 30}

        response = client.put("/api/v1/settings/allowances/vacation/2010", json={"days": 25})
        assert response.json()["days_per_year"] == {"2000": 30, "2010": 25}

        response = client.delete("/api/v1/settings/allowances/vacation/2010")
        assert response.json()["days_per_year"] == {"2000": 30}

        response = client.delete("/api/v1/settings/allowances/vacation/1990")
        assert response.status_code == 404

    def test_holiday_has_no_allowance(self, client):
        """Test that holidays have no allowance table."""
        response = client.get("/api/v1/settings/allowances/holiday")
        assert response.status_code == 422
