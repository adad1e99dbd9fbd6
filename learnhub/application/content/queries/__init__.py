from learnhub.application.content.queries.get_content import GetContentHandler, GetContentQuery
from learnhub.application.content.queries.get_content_by_status import (
    GetContentByStatusHandler,
    GetContentByStatusQuery,
)
from learnhub.application.content.queries.get_published_content import (
    GetPublishedContentHandler,
    GetPublishedContentQuery,
)
from learnhub.application.content.queries.get_topic import (
    GetTopicHandler,
    GetTopicQuery,
    ListTopicsHandler,
    ListTopicsQuery,
)

__all__ = [
    "GetContentByStatusHandler",
    "GetContentByStatusQuery",
    "GetContentHandler",
    "GetContentQuery",
    "GetPublishedContentHandler",
    "GetPublishedContentQuery",
    "GetTopicHandler",
    "GetTopicQuery",
    "ListTopicsHandler",
    "ListTopicsQuery",
]
