from .content_repository import ContentRepositoryProtocol
from .topic_repository import TopicRepositoryProtocol

__all__ = ["ContentRepositoryProtocol", "TopicRepositoryProtocol"]
