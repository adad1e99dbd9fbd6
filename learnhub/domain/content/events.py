"""Domain events raised by the Content aggregate."""

from dataclasses import dataclass

from learnhub.domain.common.domain_event import DomainEvent
from learnhub.domain.common.value_objects import ContentId


@dataclass(frozen=True)
class ContentPublished(DomainEvent):
    """Content moved into the published state."""

    content_id: ContentId
