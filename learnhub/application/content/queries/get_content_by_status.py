"""Query and handler for listing content in a workflow status."""

from dataclasses import dataclass

from learnhub.application.common.query import Query, QueryHandler
from learnhub.application.content.dtos import ContentDTO, content_dtos_with_topics
from learnhub.application.content.protocols.content_repository import ContentRepositoryProtocol
from learnhub.application.content.protocols.topic_repository import TopicRepositoryProtocol
from learnhub.domain.common.value_objects import TopicId
from learnhub.domain.content.value_objects import ContentStatus
from learnhub.exceptions import TopicNotFoundError


@dataclass(frozen=True)
class GetContentByStatusQuery(Query):
    status: ContentStatus
    topic_id: int | None = None


class GetContentByStatusHandler(QueryHandler[GetContentByStatusQuery, list[ContentDTO]]):
    def __init__(
        self,
        content_repository: ContentRepositoryProtocol,
        topic_repository: TopicRepositoryProtocol,
    ) -> None:
        self.content_repository = content_repository
        self.topic_repository = topic_repository

    def handle(self, query: GetContentByStatusQuery) -> list[ContentDTO]:
        """
        List content in the given status, ordered by order then title.

        Raises:
            TopicNotFoundError: If a topic filter is given and the topic does not exist
        """
        topic_id = None
        if query.topic_id is not None:
            topic_id = TopicId(query.topic_id)
            if self.topic_repository.find_by_id(topic_id) is None:
                raise TopicNotFoundError(query.topic_id)

        contents = self.content_repository.find_by_status(ContentStatus(query.status), topic_id)
        return content_dtos_with_topics(contents, self.topic_repository)
