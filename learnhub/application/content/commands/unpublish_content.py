"""Command and handler for reverting published content to draft."""

from dataclasses import dataclass

from learnhub.application.content.commands.transition import (
    ContentTransitionCommand,
    ContentTransitionHandler,
)
from learnhub.domain.content.entities.content import Content


@dataclass(frozen=True)
class UnpublishContentCommand(ContentTransitionCommand):
    pass


class UnpublishContentHandler(ContentTransitionHandler[UnpublishContentCommand]):
    """Raises ContentNotPublishedError unless the content is published."""

    log_event = "unpublished_content"

    def apply(self, content: Content) -> None:
        content.unpublish()
