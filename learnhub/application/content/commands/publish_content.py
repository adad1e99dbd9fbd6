"""Command and handler for publishing content."""

from dataclasses import dataclass

from learnhub.application.content.commands.transition import (
    ContentTransitionCommand,
    ContentTransitionHandler,
)
from learnhub.domain.content.entities.content import Content


@dataclass(frozen=True)
class PublishContentCommand(ContentTransitionCommand):
    pass


class PublishContentHandler(ContentTransitionHandler[PublishContentCommand]):
    """
    Publish existing content.

    Raises:
        ContentNotFoundError: If the content does not exist
        ContentAlreadyPublishedError: If the content is already published
        ConcurrencyConflictError: If the content changed while publishing

    ContentPublished reaches the event bus only after the save succeeded.
    """

    log_event = "published_content"

    def apply(self, content: Content) -> None:
        content.publish()
