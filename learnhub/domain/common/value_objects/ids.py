from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class TopicId(EntityId):
    """Strongly-typed topic identifier."""

    value: int


@dataclass(frozen=True)
class ContentId(EntityId):
    """Strongly-typed content identifier."""

    value: int
