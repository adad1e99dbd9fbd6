"""Mapper for Topic ORM ↔ Domain conversion."""

from learnhub.domain.common.value_objects import TopicId
from learnhub.domain.content.entities.topic import Topic
from learnhub.domain.content.value_objects import TopicDifficulty
from learnhub.infrastructure.content.mappers.content_mapper import as_utc
from learnhub.models import Topic as TopicORM


class TopicMapper:
    def to_domain(self, orm_model: TopicORM) -> Topic:
        return Topic.create_with_id(
            id=TopicId(orm_model.id),
            title=orm_model.title,
            slug=orm_model.slug,
            description=orm_model.description,
            order=orm_model.order_number,
            difficulty=TopicDifficulty(orm_model.difficulty),
            created_at=as_utc(orm_model.created_at),
            updated_at=as_utc(orm_model.updated_at),
        )

    def to_orm(self, domain_entity: Topic) -> TopicORM:
        return TopicORM(
            id=domain_entity.id.value if domain_entity.id.is_assigned else None,
            title=domain_entity.title,
            slug=domain_entity.slug,
            description=domain_entity.description,
            order_number=domain_entity.order,
            difficulty=str(domain_entity.difficulty),
        )
