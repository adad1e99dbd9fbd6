"""Command and handler for creating content."""

from dataclasses import dataclass, field
from typing import Any

import structlog

from learnhub.application.common.cache import CacheProtocol
from learnhub.application.common.command import Command, CommandHandler
from learnhub.application.content.cache_keys import invalidate_published_content
from learnhub.application.content.protocols.content_repository import ContentRepositoryProtocol
from learnhub.application.content.protocols.topic_repository import TopicRepositoryProtocol
from learnhub.domain.common.value_objects import TopicId
from learnhub.domain.content.entities.content import Content
from learnhub.domain.content.value_objects import CodeExample, ContentStatus
from learnhub.exceptions import TopicNotFoundError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CreateContentCommand(Command):
    topic_id: int
    title: str
    body: str
    code_examples: list[dict[str, Any]] = field(default_factory=list)
    order: int | None = None
    status: ContentStatus | None = None


class CreateContentHandler(CommandHandler[CreateContentCommand, Content]):
    def __init__(
        self,
        content_repository: ContentRepositoryProtocol,
        topic_repository: TopicRepositoryProtocol,
        cache: CacheProtocol,
    ) -> None:
        self.content_repository = content_repository
        self.topic_repository = topic_repository
        self.cache = cache

    def handle(self, command: CreateContentCommand) -> Content:
        """
        Create a new content item under an existing topic.

        Args:
            command: Topic reference and content fields

        Returns:
            Persisted content with id, version and timestamps assigned

        Raises:
            TopicNotFoundError: If the topic does not exist
            ValidationError: If title, body or order is invalid
        """
        topic_id = TopicId(command.topic_id)
        if self.topic_repository.find_by_id(topic_id) is None:
            raise TopicNotFoundError(command.topic_id)

        content = Content.create(
            topic_id=topic_id,
            title=command.title,
            body=command.body,
            code_examples=[CodeExample.from_primitive(e) for e in command.code_examples],
            order=command.order,
            status=command.status,
        )

        saved = self.content_repository.save(content)

        if saved.is_published:
            invalidate_published_content(self.cache, saved.topic_id)

        logger.info(
            "created_content",
            content_id=saved.id.value,
            topic_id=command.topic_id,
            status=str(saved.status),
        )
        return saved
