from .content_repository import ContentRepository
from .topic_repository import TopicRepository

__all__ = ["ContentRepository", "TopicRepository"]
