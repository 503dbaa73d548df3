"""Pytest configuration and fixtures."""

import os
from collections.abc import Generator
from datetime import UTC, datetime
from typing import Any

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "test")

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker

from cardwise import models
from cardwise.core import container
from cardwise.database import Base, create_database_engine, get_db
from cardwise.main import app
from tests.fakes import FakeClock

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# One shared connection with foreign keys enforced, as in the app
test_engine = create_database_engine(TEST_DATABASE_URL)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

TEST_USER_ID = 1


@pytest.fixture
def clock() -> Generator[FakeClock, None, None]:
    """Replace the container clock; cached singletons are rebuilt around it."""
    fake = FakeClock(datetime(2026, 3, 2, 9, 0, tzinfo=UTC))
    container.clock.override(providers.Object(fake))
    container.bundle_cache.reset()
    container.scheduler.reset()
    yield fake
    container.clock.reset_override()
    container.bundle_cache.reset()
    container.scheduler.reset()


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
def client(db_session: Session, clock: FakeClock) -> Generator[TestClient, Any, None]:
    """Create a test client with database session and a controllable clock."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app, headers={"X-User-Id": str(TEST_USER_ID)}) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def test_topic(db_session: Session) -> models.Topic:
    """Create a topic owned by the test user."""
    topic = models.Topic(user_id=TEST_USER_ID, name="Cell biology")
    db_session.add(topic)
    db_session.commit()
    db_session.refresh(topic)
    return topic


@pytest.fixture
def test_summary(db_session: Session, test_topic: models.Topic) -> models.Summary:
    """Create a summary in the test topic."""
    summary = models.Summary(topic_id=test_topic.id, title="Mitochondria")
    db_session.add(summary)
    db_session.commit()
    db_session.refresh(summary)
    return summary
