"""Read-side DTOs returned by content query handlers."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from learnhub.application.content.protocols.topic_repository import TopicRepositoryProtocol
from learnhub.domain.common.value_objects import TopicId
from learnhub.domain.content.entities.content import Content
from learnhub.domain.content.entities.topic import Topic
from learnhub.domain.content.value_objects import CodeExample


@dataclass(frozen=True)
class TopicReference:
    """Denormalized reference to a content item's owning topic."""

    id: int
    title: str
    slug: str

    @classmethod
    def from_entity(cls, topic: Topic) -> "TopicReference":
        return cls(id=topic.id.value, title=topic.title, slug=topic.slug)


@dataclass(frozen=True)
class ContentDTO:
    """Flat, immutable view of a content item."""

    id: int
    topic_id: int
    title: str
    body: str
    code_examples: tuple[CodeExample, ...]
    order: int
    status: str
    published_at: datetime | None
    version: int
    created_at: datetime | None
    updated_at: datetime | None
    topic: TopicReference | None = None

    @classmethod
    def from_entity(cls, content: Content, topic: Topic | None = None) -> "ContentDTO":
        return cls(
            id=content.id.value,
            topic_id=content.topic_id.value,
            title=content.title,
            body=content.body,
            code_examples=tuple(content.code_examples),
            order=content.order,
            status=str(content.status),
            published_at=content.published_at,
            version=content.version,
            created_at=content.created_at,
            updated_at=content.updated_at,
            topic=TopicReference.from_entity(topic) if topic else None,
        )


@dataclass(frozen=True)
class TopicDTO:
    """Flat, immutable view of a topic."""

    id: int
    title: str
    slug: str
    description: str | None
    order: int
    difficulty: str
    created_at: datetime | None
    updated_at: datetime | None

    @classmethod
    def from_entity(cls, topic: Topic) -> "TopicDTO":
        return cls(
            id=topic.id.value,
            title=topic.title,
            slug=topic.slug,
            description=topic.description,
            order=topic.order,
            difficulty=str(topic.difficulty),
            created_at=topic.created_at,
            updated_at=topic.updated_at,
        )


def content_dtos_with_topics(
    contents: Iterable[Content], topic_repository: TopicRepositoryProtocol
) -> list[ContentDTO]:
    """Build listing DTOs, looking up each owning topic once."""
    topics: dict[TopicId, Topic | None] = {}
    result = []
    for content in contents:
        if content.topic_id not in topics:
            topics[content.topic_id] = topic_repository.find_by_id(content.topic_id)
        result.append(ContentDTO.from_entity(content, topics[content.topic_id]))
    return result
