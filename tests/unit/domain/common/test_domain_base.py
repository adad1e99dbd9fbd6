from dataclasses import dataclass
from datetime import UTC, datetime

import pytest

from learnhub.domain.common import BusinessRuleViolationError, DomainEvent, ValueObject
from learnhub.domain.common.value_objects import ContentId, TopicId


@dataclass(frozen=True)
class TopicRenamed(DomainEvent):
    topic_id: TopicId
    title: str


def test_ids_compare_by_type_and_value() -> None:
    assert ContentId(3) == ContentId(3)
    assert ContentId(3) != TopicId(3)
    assert len({ContentId(3), ContentId(3), ContentId(4)}) == 2


def test_value_object_requires_primitive_form() -> None:
    @dataclass(frozen=True)
    class Nameless(ValueObject):
        name: str

    with pytest.raises(TypeError):
        Nameless("x")  # type: ignore[abstract]


def test_event_payload_uses_primitives() -> None:
    occurred = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)
    event = TopicRenamed(TopicId(9), "Async", occurred_at=occurred)

    payload = event.to_dict()

    assert payload == {
        "event_type": "TopicRenamed",
        "event_id": str(event.event_id),
        "occurred_at": "2024-05-01T12:00:00+00:00",
        "topic_id": 9,
        "title": "Async",
    }


def test_business_rule_default_message() -> None:
    error = BusinessRuleViolationError("archive")

    assert error.message == "Business rule violated: archive"
    assert error.rule == "archive"
