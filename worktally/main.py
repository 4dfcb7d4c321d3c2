# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from worktally import __version__
from worktally.config import settings
from worktally.database import init_db
from worktally.schemas.common import HealthResponse

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events."""
    # Startup: Create tables
    logger.info("Initializing database...")
    init_db()
    logger.info(f"Using time zone {settings.timezone}")

    yield

    # Shutdown
    logger.info("Shutting down...")


app = FastAPI(
    title="Worktally",
    description="Self-hosted time tracking with working-hours balance",
    version=__version__,
    lifespan=lifespan,
)


@app.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="healthy")


# Import and include API router after it's created
from worktally.api.v1.router import api_router  # noqa: E402

app.include_router(api_router, prefix="/api/v1")
