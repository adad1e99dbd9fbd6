"""Query and handler for the cached published-content listing."""

from dataclasses import dataclass

import structlog

from learnhub.application.common.cache import CacheProtocol
from learnhub.application.common.query import Query, QueryHandler
from learnhub.application.content.cache_keys import published_content_key
from learnhub.application.content.dtos import ContentDTO, content_dtos_with_topics
from learnhub.application.content.protocols.content_repository import ContentRepositoryProtocol
from learnhub.application.content.protocols.topic_repository import TopicRepositoryProtocol
from learnhub.domain.common.value_objects import TopicId
from learnhub.domain.content.value_objects import ContentStatus

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class GetPublishedContentQuery(Query):
    topic_id: int | None = None


class GetPublishedContentHandler(QueryHandler[GetPublishedContentQuery, list[ContentDTO]]):
    """
    Read-through cache over the published listing.

    Each item carries a reference to its topic. A cached list is returned
    as stored, even if empty. Commands that change what is published drop
    the affected keys.
    """

    def __init__(
        self,
        content_repository: ContentRepositoryProtocol,
        topic_repository: TopicRepositoryProtocol,
        cache: CacheProtocol,
    ) -> None:
        self.content_repository = content_repository
        self.topic_repository = topic_repository
        self.cache = cache

    def handle(self, query: GetPublishedContentQuery) -> list[ContentDTO]:
        topic_id = TopicId(query.topic_id) if query.topic_id is not None else None
        key = published_content_key(topic_id)

        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("published_content_cache_hit", key=key)
            return cached

        contents = self.content_repository.find_by_status(ContentStatus.PUBLISHED, topic_id)
        result = content_dtos_with_topics(contents, self.topic_repository)
        self.cache.set(key, result)

        logger.debug("published_content_cache_miss", key=key, count=len(result))
        return result
