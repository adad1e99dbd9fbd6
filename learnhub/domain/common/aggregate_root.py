"""
Base class for Aggregate Roots.

An aggregate root owns the state-transition rules of a cluster of domain
objects. Transitions record domain events on the aggregate; the events stay
buffered until the command handler has persisted the aggregate and calls
``collect_events()`` to hand them to the event bus.

Example:
    @dataclass
    class Content(AggregateRoot[ContentId]):
        id: ContentId
        status: ContentStatus

        def publish(self) -> None:
            self.status = ContentStatus.PUBLISHED
            self._record_event(ContentPublished(content_id=self.id))
"""

from dataclasses import dataclass, field
from typing import Generic

from .domain_event import DomainEvent
from .entity import Entity, IdType


@dataclass
class AggregateRoot(Entity[IdType], Generic[IdType]):
    """
    Base class for Aggregate Roots in the domain model.

    Aggregate Roots are:
    - Entry point to an aggregate (cluster of related entities)
    - Responsible for maintaining invariants
    - The only entity referenced from outside the aggregate
    - A buffer for domain events raised by their transitions

    Buffered events are never delivered by the aggregate itself. The
    caller decides when the triggering change is durable and only then
    collects them.
    """

    _events: list[DomainEvent] = field(
        default_factory=list, repr=False, compare=False, kw_only=True
    )

    def _record_event(self, event: DomainEvent) -> None:
        """Buffer a domain event until the aggregate has been persisted."""
        self._events.append(event)

    def collect_events(self) -> list[DomainEvent]:
        """
        Collect and clear all recorded domain events.

        Command handlers call this after the store has accepted the
        aggregate, so a failed save never releases an event.
        """
        events = self._events.copy()
        self._events.clear()
        return events

    @property
    def pending_events(self) -> list[DomainEvent]:
        """Return pending events without clearing them."""
        return self._events.copy()
