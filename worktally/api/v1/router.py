# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Main API router for v1 endpoints."""

from fastapi import APIRouter

from worktally.api.v1 import days_off, frames, reports, settings, tracking

api_router = APIRouter()

# Frame, project and tag routes
api_router.include_router(frames.router, tags=["frames"])

# Tracking routes
api_router.include_router(tracking.router, prefix="/tracking", tags=["tracking"])

# Day-off calendar routes
api_router.include_router(days_off.router, prefix="/days-off", tags=["days-off"])

# Settings routes
api_router.include_router(settings.router, prefix="/settings", tags=["settings"])

# Report routes
api_router.include_router(reports.router, prefix="/reports", tags=["reports"])
