"""
Content aggregate.

Owns the publishing workflow of a documentation item:

    draft --publish--> published --unpublish--> draft
    draft|published --archive--> archived
    archived --publish--> published

Publishing records a ContentPublished event. Events stay buffered on the
aggregate until the command handler has saved it.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from learnhub.domain.common.aggregate_root import AggregateRoot
from learnhub.domain.common.exceptions import ValidationError
from learnhub.domain.common.value_objects import ContentId, TopicId
from learnhub.domain.content.events import ContentPublished
from learnhub.domain.content.exceptions import (
    ContentAlreadyArchivedError,
    ContentAlreadyPublishedError,
    ContentNotPublishedError,
)
from learnhub.domain.content.value_objects import CodeExample, ContentStatus

TITLE_MAX_LENGTH = 200


@dataclass
class Content(AggregateRoot[ContentId]):
    """
    Documentation content item.

    Business Rules:
    - Title is required and at most 200 characters
    - Body is required
    - Sibling order is a non-negative integer
    - status == published if and only if published_at is set
    - Failed transitions leave the aggregate untouched

    id, version and timestamps belong to the store: a fresh aggregate has
    id 0 and version 0 until it is saved.
    """

    id: ContentId
    topic_id: TopicId
    title: str
    body: str
    code_examples: list[CodeExample] = field(default_factory=list)
    order: int = 0
    status: ContentStatus = ContentStatus.DRAFT
    published_at: datetime | None = None
    version: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_published(self) -> bool:
        return self.status == ContentStatus.PUBLISHED

    def publish(self) -> None:
        """
        Move the content into the published state.

        Raises:
            ContentAlreadyPublishedError: If the content is already published
        """
        if self.status == ContentStatus.PUBLISHED:
            raise ContentAlreadyPublishedError(self.id)

        self.status = ContentStatus.PUBLISHED
        self.published_at = datetime.now(UTC)
        self._record_event(ContentPublished(content_id=self.id))

    def unpublish(self) -> None:
        """
        Revert published content to draft.

        Raises:
            ContentNotPublishedError: If the content is not published
        """
        if self.status != ContentStatus.PUBLISHED:
            raise ContentNotPublishedError(self.id)

        self.status = ContentStatus.DRAFT
        self.published_at = None

    def archive(self) -> None:
        """
        Archive the content.

        Archiving published content also clears published_at.

        Raises:
            ContentAlreadyArchivedError: If the content is already archived
        """
        if self.status == ContentStatus.ARCHIVED:
            raise ContentAlreadyArchivedError(self.id)

        self.status = ContentStatus.ARCHIVED
        self.published_at = None

    def revise(
        self,
        *,
        topic_id: TopicId | None = None,
        title: str | None = None,
        body: str | None = None,
        code_examples: list[CodeExample] | None = None,
        order: int | None = None,
    ) -> None:
        """
        Edit the descriptive fields of the content.

        Only the given fields change. All values are validated before any
        of them is applied.

        Raises:
            ValidationError: If a new value is invalid
        """
        new_title = _validate_title(title) if title is not None else self.title
        new_body = _validate_body(body) if body is not None else self.body
        new_order = _validate_order(order) if order is not None else self.order

        self.title = new_title
        self.body = new_body
        self.order = new_order
        if topic_id is not None:
            self.topic_id = topic_id
        if code_examples is not None:
            self.code_examples = list(code_examples)

    def to_dict(self) -> dict[str, Any]:
        """Plain-data projection with the same keys create_with_id accepts."""
        return {
            "id": self.id,
            "topic_id": self.topic_id,
            "title": self.title,
            "body": self.body,
            "code_examples": list(self.code_examples),
            "order": self.order,
            "status": self.status,
            "published_at": self.published_at,
            "version": self.version,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def create(
        cls,
        topic_id: TopicId,
        title: str,
        body: str,
        code_examples: list[CodeExample] | None = None,
        order: int | None = None,
        status: ContentStatus | None = None,
    ) -> "Content":
        """
        Create new content (ID will be 0 until persisted).

        Status defaults to draft. Content created directly as published
        gets its publication timestamp here; no event is raised for it.

        Raises:
            ValidationError: If title, body or order is invalid
        """
        status = status or ContentStatus.DRAFT
        return cls(
            id=ContentId.generate(),
            topic_id=topic_id,
            title=_validate_title(title),
            body=_validate_body(body),
            code_examples=list(code_examples or []),
            order=_validate_order(order if order is not None else 0),
            status=status,
            published_at=datetime.now(UTC) if status == ContentStatus.PUBLISHED else None,
        )

    @classmethod
    def create_with_id(
        cls,
        id: ContentId,
        topic_id: TopicId,
        title: str,
        body: str,
        code_examples: list[CodeExample],
        order: int,
        status: ContentStatus,
        published_at: datetime | None,
        version: int,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ) -> "Content":
        """Reconstitute content from persistence, copying every field verbatim."""
        return cls(
            id=id,
            topic_id=topic_id,
            title=title,
            body=body,
            code_examples=list(code_examples),
            order=order,
            status=status,
            published_at=published_at,
            version=version,
            created_at=created_at,
            updated_at=updated_at,
        )


def _validate_title(title: str) -> str:
    title = title.strip() if title else ""
    if not title:
        raise ValidationError("Title cannot be empty", field="title")
    if len(title) > TITLE_MAX_LENGTH:
        raise ValidationError(
            f"Title cannot exceed {TITLE_MAX_LENGTH} characters", field="title"
        )
    return title


def _validate_body(body: str) -> str:
    if not body or not body.strip():
        raise ValidationError("Body cannot be empty", field="body")
    return body


def _validate_order(order: int) -> int:
    if order < 0:
        raise ValidationError("Order must be non-negative", field="order", value=order)
    return order
