# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for duration parsing and formatting."""

from datetime import timedelta

import pytest

from worktally.core.durations import format_duration, parse_duration


class TestParseDuration:
    """Tests for parse_duration."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("8h", timedelta(hours=8)),
            ("7h 30m", timedelta(hours=7, minutes=30)),
            ("1d2h", timedelta(days=1, hours=2)),
            ("45 minutes", timedelta(minutes=45)),
            ("90", timedelta(seconds=90)),
            ("  6H ", timedelta(hours=6)),
        ],
    )
    def test_valid(self, text, expected):
        """Accepted formats."""
        assert parse_duration(text) == expected

    @pytest.mark.parametrize("text", ["", "   ", "8x", "h", "8h foo", "abc"])
    def test_invalid(self, text):
        """Malformed input raises ValueError."""
        with pytest.raises(ValueError):
            parse_duration(text)


class TestFormatDuration:
    """Tests for format_duration."""

    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [
            (0, "0s"),
            (61, "1m 1s"),
            (3600, "1h"),
            (88888, "1d 41m 28s"),
            (-90, "-1m 30s"),
        ],
    )
    def test_format(self, seconds, expected):
        """Zero parts are omitted."""
        assert format_duration(seconds) == expected
