"""Query and handler for reading one content item."""

from dataclasses import dataclass

from learnhub.application.common.query import Query, QueryHandler
from learnhub.application.content.dtos import ContentDTO
from learnhub.application.content.protocols.content_repository import ContentRepositoryProtocol
from learnhub.application.content.protocols.topic_repository import TopicRepositoryProtocol
from learnhub.domain.common.value_objects import ContentId
from learnhub.exceptions import ContentNotFoundError


@dataclass(frozen=True)
class GetContentQuery(Query):
    content_id: int


class GetContentHandler(QueryHandler[GetContentQuery, ContentDTO]):
    def __init__(
        self,
        content_repository: ContentRepositoryProtocol,
        topic_repository: TopicRepositoryProtocol,
    ) -> None:
        self.content_repository = content_repository
        self.topic_repository = topic_repository

    def handle(self, query: GetContentQuery) -> ContentDTO:
        """
        Get a content item together with a reference to its topic.

        Raises:
            ContentNotFoundError: If the content does not exist
        """
        content = self.content_repository.find_by_id(ContentId(query.content_id))
        if content is None:
            raise ContentNotFoundError(query.content_id)

        topic = self.topic_repository.find_by_id(content.topic_id)
        return ContentDTO.from_entity(content, topic)
