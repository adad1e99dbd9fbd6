"""Pytest configuration and fixtures."""

import os
from collections.abc import Callable, Generator
from datetime import UTC, datetime
from typing import Any

# Keep the app's own engine off the filesystem during tests
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "test")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from learnhub import models  # noqa: E402
from learnhub.core import container  # noqa: E402
from learnhub.database import Base, get_db  # noqa: E402
from learnhub.domain.content.events import ContentPublished  # noqa: E402
from learnhub.main import app  # noqa: E402

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# One shared connection, so the TestClient's worker threads see the same database
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session and fresh process-wide singletons."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    container.cache.reset()
    container.event_bus.reset()

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
    container.cache.reset()
    container.event_bus.reset()


@pytest.fixture
def published_events(client: TestClient) -> list[ContentPublished]:
    """Record every ContentPublished delivered on the app's event bus."""
    events: list[ContentPublished] = []
    container.event_bus().subscribe(ContentPublished, events.append)
    return events


@pytest.fixture
def test_topic(db_session: Session) -> models.Topic:
    """Create a test topic."""
    topic = models.Topic(
        title="Python Basics",
        slug="python-basics",
        description="First steps with Python",
        order_number=1,
        difficulty="beginner",
    )
    db_session.add(topic)
    db_session.commit()
    db_session.refresh(topic)
    return topic


@pytest.fixture
def other_topic(db_session: Session) -> models.Topic:
    """Create a second topic."""
    topic = models.Topic(
        title="Async Python",
        slug="async-python",
        order_number=2,
        difficulty="advanced",
    )
    db_session.add(topic)
    db_session.commit()
    db_session.refresh(topic)
    return topic


@pytest.fixture
def make_content(db_session: Session) -> Callable[..., models.Content]:
    """Insert content rows directly, bypassing the command side."""

    def _make(
        topic: models.Topic,
        title: str,
        *,
        status: str = "draft",
        order_number: int = 0,
    ) -> models.Content:
        content = models.Content(
            topic_id=topic.id,
            title=title,
            body=f"Body of {title}",
            code_examples=[],
            order_number=order_number,
            status=status,
            published_at=datetime.now(UTC) if status == "published" else None,
        )
        db_session.add(content)
        db_session.commit()
        db_session.refresh(content)
        return content

    return _make
