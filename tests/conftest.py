# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Set test environment before importing app
os.environ["WORKTALLY_DATABASE_URL"] = "sqlite:///./test.db"
os.environ["WORKTALLY_TIMEZONE"] = "UTC"

from worktally.api.deps import get_db, get_now
from worktally.core.types import Frame
from worktally.main import app
from worktally.models.base import Base
from worktally.services import frame_service

# Test database setup
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# 2024-01-03 12:00:00 UTC, a Wednesday
NOW = 1704283200


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database and clock overrides."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_now] = lambda: NOW
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def add_frames(db_session):
    """Store closed frames given as (start, end, project, tags) tuples."""

    def _add(*rows):
        for start, end, project, tags in rows:
            frame_service.add_frame(
                db_session,
                Frame(start_time=start, end_time=end, project=project, tags=tags, updated_at=end),
            )

    return _add
