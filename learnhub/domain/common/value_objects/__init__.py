"""Common value objects shared across all domain modules."""

from .ids import ContentId, TopicId

__all__ = [
    "ContentId",
    "TopicId",
]
