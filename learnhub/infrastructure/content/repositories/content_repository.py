"""Repository for Content aggregates."""

import structlog
from sqlalchemy import select
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from learnhub.domain.common.value_objects import ContentId, TopicId
from learnhub.domain.content.entities.content import Content
from learnhub.domain.content.value_objects import ContentStatus
from learnhub.exceptions import ConcurrencyConflictError, ContentNotFoundError
from learnhub.infrastructure.content.mappers.content_mapper import ContentMapper
from learnhub.models import Content as ContentORM

logger = structlog.get_logger(__name__)


class ContentRepository:
    """Repository for Content aggregates."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = ContentMapper()

    def find_by_id(self, content_id: ContentId) -> Content | None:
        """
        Find content by ID.

        Args:
            content_id: The content ID

        Returns:
            Reconstituted Content aggregate if found, None otherwise
        """
        orm_model = self.db.get(ContentORM, content_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

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
        stmt = select(ContentORM).where(ContentORM.status == str(status))
        if topic_id is not None:
            stmt = stmt.where(ContentORM.topic_id == topic_id.value)
        stmt = stmt.order_by(ContentORM.order_number.asc(), ContentORM.title.asc())

        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def save(self, content: Content) -> Content:
        """
        Save content (create or update).

        Args:
            content: The content aggregate to save

        Returns:
            Saved content with database-generated values

        Raises:
            ContentNotFoundError: If existing content disappeared
            ConcurrencyConflictError: If the aggregate's version is stale
        """
        if not content.id.is_assigned:
            # Create new
            orm_model = self.mapper.to_orm(content)
            self.db.add(orm_model)
            self.db.commit()
            self.db.refresh(orm_model)
            return self.mapper.to_domain(orm_model)

        # Update existing
        orm_model = self.db.get(ContentORM, content.id.value)
        if not orm_model:
            raise ContentNotFoundError(content.id.value)
        if orm_model.version != content.version:
            raise ConcurrencyConflictError(content.id.value, content.version, orm_model.version)

        self.mapper.to_orm(content, orm_model)
        try:
            self.db.commit()
        except StaleDataError as e:
            self.db.rollback()
            logger.warning(
                "content_version_conflict",
                content_id=content.id.value,
                expected_version=content.version,
            )
            raise ConcurrencyConflictError(content.id.value, content.version, None) from e

        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)
