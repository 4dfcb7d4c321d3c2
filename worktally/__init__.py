# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Self-hosted time tracking with working-hours balance and day-off accounting."""

__version__ = "0.1.0"
