"""Command and handler for creating a topic."""

from dataclasses import dataclass

import structlog

from learnhub.application.common.command import Command, CommandHandler
from learnhub.application.content.protocols.topic_repository import TopicRepositoryProtocol
from learnhub.domain.content.entities.topic import Topic
from learnhub.domain.content.value_objects import TopicDifficulty
from learnhub.exceptions import TopicSlugConflictError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CreateTopicCommand(Command):
    title: str
    slug: str
    description: str | None = None
    order: int = 0
    difficulty: TopicDifficulty = TopicDifficulty.BEGINNER


class CreateTopicHandler(CommandHandler[CreateTopicCommand, Topic]):
    def __init__(self, topic_repository: TopicRepositoryProtocol) -> None:
        self.topic_repository = topic_repository

    def handle(self, command: CreateTopicCommand) -> Topic:
        """
        Create a topic with a unique slug.

        Raises:
            TopicSlugConflictError: If another topic already uses the slug
            ValidationError: If title, slug or order is invalid
        """
        topic = Topic.create(
            title=command.title,
            slug=command.slug,
            description=command.description,
            order=command.order,
            difficulty=command.difficulty,
        )

        if self.topic_repository.find_by_slug(topic.slug) is not None:
            raise TopicSlugConflictError(topic.slug)

        saved = self.topic_repository.save(topic)
        logger.info("created_topic", topic_id=saved.id.value, slug=saved.slug)
        return saved
