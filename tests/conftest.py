"""Pytest fixtures and configuration for StudyWell tests."""

import pytest
from datetime import datetime, timedelta
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient
import uuid

from studywell.database.database import Base
from studywell.database import models  # noqa: F401
from studywell.database.repository import TaskRepository
from studywell.database.record_repository import HealthRepository, MoodRepository
from studywell.models.task import Task
from studywell.services.record_service import RecordService
from studywell.services.task_service import TaskService
from studywell.services.view_cache import ViewCache


# Use in-memory SQLite database for tests
TEST_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture(scope="function")
def db_session():
    """Create a database session for testing.

    Uses an in-memory SQLite database that is created fresh for each test.
    """
    # StaticPool keeps the single in-memory connection alive across sessions
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False
    )

    Base.metadata.create_all(bind=engine)

    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def task_repository(db_session: Session):
    """Create a TaskRepository instance for testing."""
    return TaskRepository(db_session)


@pytest.fixture
def health_repository(db_session: Session):
    return HealthRepository(db_session)


@pytest.fixture
def mood_repository(db_session: Session):
    return MoodRepository(db_session)


@pytest.fixture
def view_cache():
    """A fresh view cache per test (no TTL expiry during a test)."""
    return ViewCache(ttl_seconds=3600)


@pytest.fixture
def task_service(db_session: Session, view_cache: ViewCache):
    return TaskService(db_session, view_cache)


@pytest.fixture
def record_service(db_session: Session, view_cache: ViewCache):
    return RecordService(db_session, view_cache)


@pytest.fixture
def sample_task_base():
    """Base task data for creating test tasks.

    Returns a dict with default task attributes that can be overridden.
    """
    now = datetime.utcnow()
    return {
        "id": str(uuid.uuid4()),
        "title": "Test Task",
        "description": "Test description",
        "due_date": None,
        "estimate_min": 30,
        "importance": 3,
        "is_done": False,
        "created_at": now,
        "updated_at": now,
    }


@pytest.fixture
def sample_task(sample_task_base):
    """Create a sample Task object for testing."""
    return Task(**sample_task_base)


@pytest.fixture
def task_due_soon(sample_task_base):
    """Create a task due in 12 hours."""
    return Task(**{**sample_task_base, "due_date": datetime.utcnow() + timedelta(hours=12)})


@pytest.fixture
def test_client(db_session: Session, view_cache: ViewCache):
    """Create a FastAPI test client with overridden database and view-cache dependencies."""
    from studywell.api.app import app
    from studywell.api.dependencies import get_view_cache
    from studywell.database.database import get_db

    # Override the get_db dependency to use our test database session
    def override_get_db():
        try:
            yield db_session
        finally:
            pass  # Don't close the session here, let the fixture handle it

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_view_cache] = lambda: view_cache

    with TestClient(app) as client:
        yield client

    # Clean up dependency overrides
    app.dependency_overrides.clear()
