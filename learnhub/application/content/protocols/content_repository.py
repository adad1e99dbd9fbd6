"""Protocol for the Content store."""

from typing import Protocol

from learnhub.domain.common.value_objects import ContentId, TopicId
from learnhub.domain.content.entities.content import Content
from learnhub.domain.content.value_objects import ContentStatus


class ContentRepositoryProtocol(Protocol):
    """Protocol for Content repository operations."""

    def find_by_id(self, content_id: ContentId) -> Content | None:
        """
        Find content by ID.

        Args:
            content_id: The content ID

        Returns:
            Reconstituted Content aggregate if found, None otherwise
        """
        ...

    def find_by_status(
        self, status: ContentStatus, topic_id: TopicId | None = None
    ) -> list[Content]:
        """
        Get all content in a status, optionally limited to one topic.

        Args:
            status: The workflow status to match
            topic_id: Optional owning topic filter

        Returns:
            List of content ordered by order ASC, then title ASC
        """
        ...

    def save(self, content: Content) -> Content:
        """
        Save content (create or update).

        New content (id 0) is inserted and receives its id, version 1 and
        timestamps. Existing content is updated only if its version still
        matches the stored one; the stored version is then bumped by one.

        Args:
            content: The content aggregate to save

        Returns:
            Saved content with store-generated values

        Raises:
            ContentNotFoundError: If existing content disappeared
            ConcurrencyConflictError: If the content version is stale
        """
        ...
