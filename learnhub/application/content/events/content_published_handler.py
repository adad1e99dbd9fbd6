"""Reaction to content becoming publicly visible."""

import structlog

from learnhub.domain.content.events import ContentPublished

logger = structlog.get_logger(__name__)


class ContentPublishedHandler:
    """
    Subscriber for ContentPublished.

    Records the publication in the structured log. Notification fan-out,
    search indexing and static page generation subscribe alongside it
    on the same event bus.
    """

    def handle(self, event: ContentPublished) -> None:
        logger.info(
            "content_published",
            content_id=event.content_id.value,
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
        )

    def __call__(self, event: ContentPublished) -> None:
        self.handle(event)
