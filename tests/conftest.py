"""Pytest configuration and fixtures."""

import os
from collections.abc import Callable, Generator
from typing import Any

# Settings are read once at import time of the app; point them at SQLite first
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["DB_DRIVER"] = "sqlite"
os.environ["ENVIRONMENT"] = "test"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from user_api.database import Base, get_db  # noqa: E402
from user_api.main import app  # noqa: E402

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# Create test engine; one shared connection so every thread sees the same database
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    # Create all tables
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


CreateUserFunc = Callable[..., dict[str, Any]]


@pytest.fixture
def create_user(client: TestClient) -> CreateUserFunc:
    """Fixture factory for creating users via POST /api/v1/users/."""

    def _create_user(name: str = "Ada", dob: str = "1990-05-10") -> dict[str, Any]:
        response = client.post("/api/v1/users/", json={"name": name, "dob": dob})
        assert response.status_code == 201, response.text
        return response.json()

    return _create_user
