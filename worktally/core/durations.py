# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Human-readable duration parsing and formatting."""

import re
from datetime import timedelta

_UNIT_SECONDS = {
    "d": 86400,
    "day": 86400,
    "days": 86400,
    "h": 3600,
    "hr": 3600,
    "hour": 3600,
    "hours": 3600,
    "m": 60,
    "min": 60,
    "mins": 60,
    "minute": 60,
    "minutes": 60,
    "s": 1,
    "sec": 1,
    "secs": 1,
    "second": 1,
    "seconds": 1,
}

_PART_PATTERN = re.compile(r"(\d+)\s*([a-z]+)")


def parse_duration(text: str) -> timedelta:
    """Parse a duration such as ``"8h"``, ``"7h 30m"`` or ``"1d2h"``.

    A bare integer is read as seconds.

    Args:
        text: The duration string.

    Returns:
        The parsed duration.

    Raises:
        ValueError: If the string is empty or contains an unknown unit.
    """
    cleaned = text.strip().lower()
    if not cleaned:
        raise ValueError("Empty duration")

    if cleaned.isdigit():
        return timedelta(seconds=int(cleaned))

    total = 0
    position = 0
    for match in _PART_PATTERN.finditer(cleaned):
        if cleaned[position:match.start()].strip():
            raise ValueError(f"Invalid duration: {text!r}")
        amount, unit = match.groups()
        if unit not in _UNIT_SECONDS:
            raise ValueError(f"Unknown duration unit {unit!r} in {text!r}")
        total += int(amount) * _UNIT_SECONDS[unit]
        position = match.end()

    if position == 0 or cleaned[position:].strip():
        raise ValueError(f"Invalid duration: {text!r}")

    return timedelta(seconds=total)


def format_duration(seconds: int) -> str:
    """Format seconds as ``"1d 2h 3m 4s"``, omitting zero parts.

    Zero renders as ``"0s"``; negative values get a leading ``-``.
    """
    negative = seconds < 0
    remaining = abs(seconds)

    days, remaining = divmod(remaining, 86400)
    hours, remaining = divmod(remaining, 3600)
    minutes, secs = divmod(remaining, 60)

    parts = []
    if days:
        parts.append(f"{days}d")
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    if secs or not parts:
        parts.append(f"{secs}s")

    result = " ".join(parts)
    return f"-{result}" if negative else result
