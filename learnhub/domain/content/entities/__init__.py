from .content import Content
from .topic import Topic

__all__ = ["Content", "Topic"]
