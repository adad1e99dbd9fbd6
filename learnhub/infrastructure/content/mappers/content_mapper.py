"""Mapper for Content ORM ↔ Domain conversion."""

from datetime import UTC, datetime

from learnhub.domain.common.value_objects import ContentId, TopicId
from learnhub.domain.content.entities.content import Content
from learnhub.domain.content.value_objects import CodeExample, ContentStatus
from learnhub.models import Content as ContentORM


def as_utc(value: datetime | None) -> datetime | None:
    # SQLite returns naive datetimes even for timezone-aware columns
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class ContentMapper:
    """Mapper for Content ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: ContentORM) -> Content:
        """Convert ORM model to a reconstituted aggregate."""
        return Content.create_with_id(
            id=ContentId(orm_model.id),
            topic_id=TopicId(orm_model.topic_id),
            title=orm_model.title,
            body=orm_model.body,
            code_examples=[CodeExample.from_primitive(e) for e in orm_model.code_examples or []],
            order=orm_model.order_number,
            status=ContentStatus(orm_model.status),
            published_at=as_utc(orm_model.published_at),
            version=orm_model.version,
            created_at=as_utc(orm_model.created_at),
            updated_at=as_utc(orm_model.updated_at),
        )

    def to_orm(self, domain_entity: Content, orm_model: ContentORM | None = None) -> ContentORM:
        """
        Convert domain entity to ORM model.

        The version column is left to SQLAlchemy's version counter.
        """
        if orm_model:
            # Update existing
            orm_model.topic_id = domain_entity.topic_id.value
            orm_model.title = domain_entity.title
            orm_model.body = domain_entity.body
            orm_model.code_examples = [e.to_primitive() for e in domain_entity.code_examples]
            orm_model.order_number = domain_entity.order
            orm_model.status = str(domain_entity.status)
            orm_model.published_at = domain_entity.published_at
            return orm_model

        # Create new
        return ContentORM(
            id=domain_entity.id.value if domain_entity.id.is_assigned else None,
            topic_id=domain_entity.topic_id.value,
            title=domain_entity.title,
            body=domain_entity.body,
            code_examples=[e.to_primitive() for e in domain_entity.code_examples],
            order_number=domain_entity.order,
            status=str(domain_entity.status),
            published_at=domain_entity.published_at,
        )
