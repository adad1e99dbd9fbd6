"""Topic entity: the owner of a group of content items."""

import re
from dataclasses import dataclass
from datetime import datetime

from learnhub.domain.common.entity import Entity
from learnhub.domain.common.exceptions import ValidationError
from learnhub.domain.common.value_objects import TopicId
from learnhub.domain.content.value_objects import TopicDifficulty

TITLE_MAX_LENGTH = 200
SLUG_MAX_LENGTH = 200
SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


@dataclass
class Topic(Entity[TopicId]):
    """
    Topic grouping related documentation content.

    Business Rules:
    - Title is required and at most 200 characters
    - Slug is lowercase words joined by hyphens, at most 200 characters,
      and unique across topics (enforced by the store)
    - Order is a non-negative integer

    Content handlers only read topics: they verify a content item's owner
    exists and embed a short reference to it.
    """

    id: TopicId
    title: str
    slug: str
    description: str | None = None
    order: int = 0
    difficulty: TopicDifficulty = TopicDifficulty.BEGINNER
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def create(
        cls,
        title: str,
        slug: str,
        description: str | None = None,
        order: int = 0,
        difficulty: TopicDifficulty = TopicDifficulty.BEGINNER,
    ) -> "Topic":
        """
        Create a new topic that has not been saved yet.

        Raises:
            ValidationError: If title, slug or order is invalid
        """
        title = title.strip() if title else ""
        if not title:
            raise ValidationError("Title cannot be empty", field="title")
        if len(title) > TITLE_MAX_LENGTH:
            raise ValidationError(
                f"Title cannot exceed {TITLE_MAX_LENGTH} characters", field="title"
            )
        if not slug or len(slug) > SLUG_MAX_LENGTH or not SLUG_PATTERN.match(slug):
            raise ValidationError(
                "Slug must be lowercase letters and digits separated by hyphens",
                field="slug",
                value=slug,
            )
        if order < 0:
            raise ValidationError("Order must be non-negative", field="order", value=order)

        return cls(
            id=TopicId.generate(),
            title=title,
            slug=slug,
            description=description,
            order=order,
            difficulty=difficulty,
        )

    @classmethod
    def create_with_id(
        cls,
        id: TopicId,
        title: str,
        slug: str,
        description: str | None,
        order: int,
        difficulty: TopicDifficulty,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ) -> "Topic":
        """Reconstitute a topic from persistence."""
        return cls(
            id=id,
            title=title,
            slug=slug,
            description=description,
            order=order,
            difficulty=difficulty,
            created_at=created_at,
            updated_at=updated_at,
        )
