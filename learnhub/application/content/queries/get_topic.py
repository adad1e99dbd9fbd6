"""Queries and handlers for reading topics."""

from dataclasses import dataclass

from learnhub.application.common.query import Query, QueryHandler
from learnhub.application.content.dtos import TopicDTO
from learnhub.application.content.protocols.topic_repository import TopicRepositoryProtocol
from learnhub.domain.common.value_objects import TopicId
from learnhub.exceptions import TopicNotFoundError


@dataclass(frozen=True)
class GetTopicQuery(Query):
    topic_id: int


@dataclass(frozen=True)
class ListTopicsQuery(Query):
    pass


class GetTopicHandler(QueryHandler[GetTopicQuery, TopicDTO]):
    def __init__(self, topic_repository: TopicRepositoryProtocol) -> None:
        self.topic_repository = topic_repository

    def handle(self, query: GetTopicQuery) -> TopicDTO:
        """
        Get one topic by id.

        Raises:
            TopicNotFoundError: If the topic does not exist
        """
        topic = self.topic_repository.find_by_id(TopicId(query.topic_id))
        if topic is None:
            raise TopicNotFoundError(query.topic_id)
        return TopicDTO.from_entity(topic)


class ListTopicsHandler(QueryHandler[ListTopicsQuery, list[TopicDTO]]):
    def __init__(self, topic_repository: TopicRepositoryProtocol) -> None:
        self.topic_repository = topic_repository

    def handle(self, query: ListTopicsQuery) -> list[TopicDTO]:
        return [TopicDTO.from_entity(t) for t in self.topic_repository.find_all()]
