"""
Content publishing domain.

Topics group documentation content; Content items move through the
draft/published/archived workflow owned by the Content aggregate.
"""

from .entities import Content, Topic
from .events import ContentPublished
from .exceptions import (
    ContentAlreadyArchivedError,
    ContentAlreadyPublishedError,
    ContentNotPublishedError,
    InvalidContentTransitionError,
)
from .value_objects import CodeExample, ContentStatus, TopicDifficulty

__all__ = [
    "CodeExample",
    "Content",
    "ContentAlreadyArchivedError",
    "ContentAlreadyPublishedError",
    "ContentNotPublishedError",
    "ContentPublished",
    "ContentStatus",
    "InvalidContentTransitionError",
    "Topic",
    "TopicDifficulty",
]
