"""Command and handler for archiving content."""

from dataclasses import dataclass

from learnhub.application.content.commands.transition import (
    ContentTransitionCommand,
    ContentTransitionHandler,
)
from learnhub.domain.content.entities.content import Content


@dataclass(frozen=True)
class ArchiveContentCommand(ContentTransitionCommand):
    pass


class ArchiveContentHandler(ContentTransitionHandler[ArchiveContentCommand]):
    log_event = "archived_content"

    def apply(self, content: Content) -> None:
        content.archive()
