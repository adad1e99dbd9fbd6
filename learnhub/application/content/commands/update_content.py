"""Command and handler for editing content fields."""

from dataclasses import dataclass
from typing import Any

import structlog

from learnhub.application.common.cache import CacheProtocol
from learnhub.application.common.command import Command, CommandHandler
from learnhub.application.content.cache_keys import invalidate_published_content
from learnhub.application.content.protocols.content_repository import ContentRepositoryProtocol
from learnhub.application.content.protocols.topic_repository import TopicRepositoryProtocol
from learnhub.domain.common.value_objects import ContentId, TopicId
from learnhub.domain.content.entities.content import Content
from learnhub.domain.content.value_objects import CodeExample
from learnhub.exceptions import ContentNotFoundError, TopicNotFoundError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class UpdateContentCommand(Command):
    """Fields left as None are not changed."""

    content_id: int
    topic_id: int | None = None
    title: str | None = None
    body: str | None = None
    code_examples: list[dict[str, Any]] | None = None
    order: int | None = None


class UpdateContentHandler(CommandHandler[UpdateContentCommand, Content]):
    def __init__(
        self,
        content_repository: ContentRepositoryProtocol,
        topic_repository: TopicRepositoryProtocol,
        cache: CacheProtocol,
    ) -> None:
        self.content_repository = content_repository
        self.topic_repository = topic_repository
        self.cache = cache

    def handle(self, command: UpdateContentCommand) -> Content:
        """
        Edit an existing content item.

        Raises:
            ContentNotFoundError: If the content does not exist
            TopicNotFoundError: If a new topic is given and does not exist
            ValidationError: If a new value is invalid
        """
        content = self.content_repository.find_by_id(ContentId(command.content_id))
        if content is None:
            raise ContentNotFoundError(command.content_id)

        new_topic_id = None
        if command.topic_id is not None and command.topic_id != content.topic_id.value:
            new_topic_id = TopicId(command.topic_id)
            if self.topic_repository.find_by_id(new_topic_id) is None:
                raise TopicNotFoundError(command.topic_id)

        previous_topic_id = content.topic_id
        content.revise(
            topic_id=new_topic_id,
            title=command.title,
            body=command.body,
            code_examples=(
                [CodeExample.from_primitive(e) for e in command.code_examples]
                if command.code_examples is not None
                else None
            ),
            order=command.order,
        )

        saved = self.content_repository.save(content)

        if saved.is_published:
            invalidate_published_content(self.cache, previous_topic_id, saved.topic_id)

        logger.info("updated_content", content_id=saved.id.value, version=saved.version)
        return saved
