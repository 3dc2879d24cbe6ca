# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Every test gets a fresh in-memory SQLite database wired into the app through
# dependency_overrides, or a Mock session when a test must prove the database
# was never touched.
# =============================================================================

import os

# Set up test environment BEFORE importing task_service (config reads it once)
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("CORS_ORIGIN", "http://localhost:5173")

from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker
from sqlmodel import SQLModel

from task_service.database import create_db_engine, get_db
from task_service.main import app
from task_service.models import User


@pytest.fixture
def engine():
    """Fresh in-memory database with all tables."""
    engine = create_db_engine("sqlite://")
    SQLModel.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    """Session for arranging and inspecting rows directly."""
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    """TestClient whose requests use the in-memory database."""
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def mock_db():
    """Mock session injected in place of the real one."""
    session = Mock(spec=Session)

    def override_get_db():
        yield session

    app.dependency_overrides[get_db] = override_get_db
    yield session
    app.dependency_overrides.clear()


@pytest.fixture
def mock_client(mock_db):
    return TestClient(app)


def _add_user(db_session, name: str) -> int:
    user = User(name=name)
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user.id


@pytest.fixture
def user_id(db_session) -> int:
    """Id of an existing user."""
    return _add_user(db_session, "alice")


@pytest.fixture
def other_user_id(db_session) -> int:
    return _add_user(db_session, "bob")


@pytest.fixture
def make_task(client, user_id):
    """Create a task through the API and return its JSON body."""
    def _make(title: str = "Buy milk", is_done: bool = False, owner: int = None) -> dict:
        response = client.post(
            "/tasks",
            json={"title": title, "isDone": is_done, "userId": owner or user_id},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _make
