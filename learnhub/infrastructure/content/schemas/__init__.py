"""Content context schemas."""

from learnhub.infrastructure.content.schemas.content_schemas import (
    CodeExampleSchema,
    ContentCreateRequest,
    ContentListResponse,
    ContentResponse,
    ContentUpdateRequest,
    TopicReferenceSchema,
)
from learnhub.infrastructure.content.schemas.topic_schemas import (
    TopicCreateRequest,
    TopicListResponse,
    TopicResponse,
)

__all__ = [
    "CodeExampleSchema",
    "ContentCreateRequest",
    "ContentListResponse",
    "ContentResponse",
    "ContentUpdateRequest",
    "TopicCreateRequest",
    "TopicListResponse",
    "TopicReferenceSchema",
    "TopicResponse",
]
