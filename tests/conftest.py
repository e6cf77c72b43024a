"""Root conftest for all tests.

Every test gets a fresh in-memory SQLite database bound to the app's
session factory.
"""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from fitness_tracker.db import session as db_session_module
from fitness_tracker.db.models import Base
from fitness_tracker.integrations.health.steps import StaticStepCountProvider


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    """In-memory database shared across threads for one test."""
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(test_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=test_engine)
    db_session_module.configure_engine(test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def db_session(engine) -> Generator[Session, None, None]:
    """Create a test database session."""
    session = db_session_module.get_session_factory()()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def step_provider() -> StaticStepCountProvider:
    """Provider reporting 10000 steps for today."""
    return StaticStepCountProvider.with_steps(10000)


@pytest.fixture
def client(engine, step_provider) -> Generator[TestClient, None, None]:
    """API client with the step provider replaced by a fixed one."""
    from fitness_tracker.api.dependencies import get_step_provider
    from fitness_tracker.main import app

    app.dependency_overrides[get_step_provider] = lambda: step_provider
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
