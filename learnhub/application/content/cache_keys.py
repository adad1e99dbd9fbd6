"""Cache keys for published content listings."""

import structlog

from learnhub.application.common.cache import CacheProtocol
from learnhub.domain.common.value_objects import TopicId

logger = structlog.get_logger(__name__)

PUBLISHED_CONTENT_PREFIX = "published_content_"


def published_content_key(topic_id: TopicId | None = None) -> str:
    """Key for the published listing of one topic, or of all topics."""
    return PUBLISHED_CONTENT_PREFIX + (str(topic_id.value) if topic_id is not None else "all")


def invalidate_published_content(cache: CacheProtocol, *topic_ids: TopicId) -> None:
    """Drop the global published listing and the listings of the given topics."""
    keys = [published_content_key()] + [published_content_key(t) for t in topic_ids]
    cache.delete(*keys)
    logger.debug("invalidated_published_content_cache", keys=keys)
