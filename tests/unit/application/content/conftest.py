"""Fixtures wiring content handlers to in-memory collaborators."""

import pytest
from content_fakes import (
    InMemoryContentRepository,
    InMemoryTopicRepository,
    RecordingCache,
    make_topic,
)

from learnhub.application.common.dispatch import EventBus
from learnhub.domain.content.entities.topic import Topic
from learnhub.domain.content.events import ContentPublished


@pytest.fixture
def topic() -> Topic:
    return make_topic(1, "Python Basics")


@pytest.fixture
def other_topic() -> Topic:
    return make_topic(2, "Async Python")


@pytest.fixture
def content_repository() -> InMemoryContentRepository:
    return InMemoryContentRepository()


@pytest.fixture
def topic_repository(topic: Topic, other_topic: Topic) -> InMemoryTopicRepository:
    return InMemoryTopicRepository(topic, other_topic)


@pytest.fixture
def cache() -> RecordingCache:
    return RecordingCache()


@pytest.fixture
def event_bus() -> EventBus:
    return EventBus()


@pytest.fixture
def published_events(event_bus: EventBus) -> list[ContentPublished]:
    events: list[ContentPublished] = []
    event_bus.subscribe(ContentPublished, events.append)
    return events
