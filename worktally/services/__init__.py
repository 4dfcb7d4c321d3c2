# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Services package."""

from worktally.services import (
    day_off_service,
    frame_service,
    report_service,
    settings_service,
    tracking_service,
)

__all__ = [
    "day_off_service",
    "frame_service",
    "report_service",
    "settings_service",
    "tracking_service",
]
