"""Base class for domain events, e.g. ``ContentPublished``."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any
from uuid import UUID, uuid4

from .value_object import ValueObject


@dataclass(frozen=True)
class DomainEvent:
    """
    Immutable record of something that happened, named in the past tense.

    ``event_id`` and ``occurred_at`` are keyword-only so subclasses can add
    required fields.
    """

    event_id: UUID = field(default_factory=uuid4, kw_only=True)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC), kw_only=True)

    @property
    def event_type(self) -> str:
        return type(self).__name__

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready payload: ids as primitives, timestamps as ISO strings."""
        payload: dict[str, Any] = {"event_type": self.event_type}
        for name, value in vars(self).items():
            if isinstance(value, ValueObject):
                value = value.to_primitive()
            elif isinstance(value, datetime):
                value = value.isoformat()
            elif isinstance(value, UUID):
                value = str(value)
            payload[name] = value
        return payload
