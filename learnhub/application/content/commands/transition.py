"""Shared load, transition, persist and flush flow for workflow commands."""

from abc import abstractmethod
from dataclasses import dataclass
from typing import TypeVar

import structlog

from learnhub.application.common.cache import CacheProtocol
from learnhub.application.common.command import Command, CommandHandler
from learnhub.application.common.dispatch import EventBus
from learnhub.application.content.cache_keys import invalidate_published_content
from learnhub.application.content.protocols.content_repository import ContentRepositoryProtocol
from learnhub.domain.common.value_objects import ContentId
from learnhub.domain.content.entities.content import Content
from learnhub.exceptions import ContentNotFoundError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ContentTransitionCommand(Command):
    content_id: int


TTransition = TypeVar("TTransition", bound=ContentTransitionCommand)


class ContentTransitionHandler(CommandHandler[TTransition, Content]):
    """
    Base handler for a single workflow transition on existing content.

    Order of operations is fixed: transition in memory, save, invalidate
    the published listings, then release the aggregate's events. If the
    transition or the save raises, nothing after it runs.
    """

    log_event = "content_status_changed"

    def __init__(
        self,
        content_repository: ContentRepositoryProtocol,
        event_bus: EventBus,
        cache: CacheProtocol,
    ) -> None:
        self.content_repository = content_repository
        self.event_bus = event_bus
        self.cache = cache

    @abstractmethod
    def apply(self, content: Content) -> None:
        """Run the aggregate transition."""
        raise NotImplementedError

    def handle(self, command: TTransition) -> Content:
        content = self.content_repository.find_by_id(ContentId(command.content_id))
        if content is None:
            raise ContentNotFoundError(command.content_id)

        self.apply(content)

        saved = self.content_repository.save(content)
        invalidate_published_content(self.cache, saved.topic_id)
        self.event_bus.publish(content.collect_events())

        logger.info(
            self.log_event,
            content_id=saved.id.value,
            status=str(saved.status),
            version=saved.version,
        )
        return saved
