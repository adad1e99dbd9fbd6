"""Value objects for the content domain."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from learnhub.domain.common.exceptions import ValidationError
from learnhub.domain.common.value_object import ValueObject


class ContentStatus(StrEnum):
    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class TopicDifficulty(StrEnum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


@dataclass(frozen=True)
class CodeExample(ValueObject):
    """
    A code snippet attached to a content item.

    Examples keep the order in which the author supplied them; the
    aggregate stores them as a list, never as a set.
    """

    language: str
    code: str
    description: str | None = None

    def __post_init__(self) -> None:
        if not self.language or not self.language.strip():
            raise ValidationError("Code example language cannot be empty", field="language")

    def to_primitive(self) -> dict[str, Any]:
        return {
            "language": self.language,
            "code": self.code,
            "description": self.description,
        }

    @classmethod
    def from_primitive(cls, data: dict[str, Any]) -> "CodeExample":
        return cls(
            language=data["language"],
            code=data["code"],
            description=data.get("description"),
        )
