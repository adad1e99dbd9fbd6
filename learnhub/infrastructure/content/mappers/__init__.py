from .content_mapper import ContentMapper
from .topic_mapper import TopicMapper

__all__ = ["ContentMapper", "TopicMapper"]
