"""
Pytest fixtures for Jobify API tests.
Uses in-memory SQLite, mocks Redis, provides two users with auth tokens and a job factory.
"""
import os
from datetime import datetime

import pytest
from unittest.mock import AsyncMock, patch
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

# Use in-memory SQLite for tests - set before config/session load
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["REDIS_URL"] = ""

from jobify.app.db.base import Base
from jobify.app.db.session import configure_sqlite
from jobify.main import app
from jobify.app.core.dependencies import get_db
from jobify.app.core.security import create_access_token, get_password_hash
from jobify.app.models.job import Job
from jobify.app.models.user import User

# StaticPool ensures all sessions share the same in-memory DB
engine = configure_sqlite(
    create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Patch the session module so the app lifespan uses our test engine
import jobify.app.db.session as session_module
session_module.engine = engine
session_module.SessionLocal = TestingSessionLocal


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(scope="function")
def db_session():
    """Create tables and a fresh DB session per test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


def _make_user(db_session, user_id: int, email: str) -> User:
    user = User(
        id=user_id,
        first_name="Test",
        last_name=f"User{user_id}",
        email=email,
        hashed_password=get_password_hash("testpass123"),
        is_active=1,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def test_user(db_session):
    return _make_user(db_session, 1, "test@example.com")


@pytest.fixture
def other_user(db_session):
    return _make_user(db_session, 2, "other@example.com")


def _headers_for(user: User) -> dict:
    token = create_access_token(data={"sub": str(user.id), "email": user.email})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers(test_user):
    """Bearer token for test user."""
    return _headers_for(test_user)


@pytest.fixture
def other_auth_headers(other_user):
    """Bearer token for the second user."""
    return _headers_for(other_user)


@pytest.fixture
def client(db_session, test_user):
    """TestClient with DB and test user pre-seeded. Redirects are returned, not followed."""
    return TestClient(app, follow_redirects=False)


@pytest.fixture
def make_job(db_session):
    """Insert a job directly: make_job(user, position=..., created_at=...)."""

    def _make(user: User, **overrides) -> Job:
        values = {
            "position": "Backend Engineer",
            "company": "Acme",
            "location": "Remote",
            "status": "pending",
            "mode": "full-time",
            "created_at": datetime.utcnow(),
        }
        values.update(overrides)
        job = Job(user_id=user.id, **values)
        db_session.add(job)
        db_session.commit()
        db_session.refresh(job)
        return job

    return _make


@pytest.fixture
def job_values():
    return {
        "position": "Frontend Developer",
        "company": "Globex",
        "location": "Berlin",
        "status": "interview",
        "mode": "part-time",
    }


@pytest.fixture(autouse=True)
def mock_redis():
    """Mock Redis cache: get returns None (cache miss), set/incr no-op. Skip connect."""
    with patch("jobify.app.utils.cache.get", new_callable=AsyncMock, return_value=None), \
         patch("jobify.app.utils.cache.set", new_callable=AsyncMock), \
         patch("jobify.app.utils.cache.incr", new_callable=AsyncMock, return_value=1), \
         patch("jobify.app.utils.cache.connect", new_callable=AsyncMock):
        yield
