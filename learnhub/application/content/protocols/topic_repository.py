"""Protocol for the Topic store."""

from typing import Protocol

from learnhub.domain.common.value_objects import TopicId
from learnhub.domain.content.entities.topic import Topic


class TopicRepositoryProtocol(Protocol):
    def find_by_id(self, topic_id: TopicId) -> Topic | None:
        """Return the topic, or None if it does not exist."""
        ...

    def find_by_slug(self, slug: str) -> Topic | None:
        """Return the topic with this slug, or None."""
        ...

    def find_all(self) -> list[Topic]:
        """Return every topic ordered by order ASC, then title ASC."""
        ...

    def save(self, topic: Topic) -> Topic:
        """
        Insert a new topic.

        Raises:
            TopicSlugConflictError: If the slug is already taken
        """
        ...
