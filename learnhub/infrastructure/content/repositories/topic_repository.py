"""Repository for Topic entities."""

import structlog
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from learnhub.domain.common.value_objects import TopicId
from learnhub.domain.content.entities.topic import Topic
from learnhub.exceptions import TopicSlugConflictError
from learnhub.infrastructure.content.mappers.topic_mapper import TopicMapper
from learnhub.models import Topic as TopicORM

logger = structlog.get_logger(__name__)


class TopicRepository:
    """Repository for Topic entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = TopicMapper()

    def find_by_id(self, topic_id: TopicId) -> Topic | None:
        orm_model = self.db.get(TopicORM, topic_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_slug(self, slug: str) -> Topic | None:
        stmt = select(TopicORM).where(TopicORM.slug == slug)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_all(self) -> list[Topic]:
        stmt = select(TopicORM).order_by(TopicORM.order_number.asc(), TopicORM.title.asc())
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def save(self, topic: Topic) -> Topic:
        """
        Insert a new topic.

        Args:
            topic: Unsaved topic entity

        Returns:
            Saved topic with database-generated values

        Raises:
            TopicSlugConflictError: If the unique slug constraint fails
        """
        orm_model = self.mapper.to_orm(topic)
        self.db.add(orm_model)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if "slug" not in str(e.orig):
                raise
            logger.warning("topic_slug_conflict", slug=topic.slug)
            raise TopicSlugConflictError(topic.slug) from e

        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)
