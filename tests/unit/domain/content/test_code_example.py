import pytest

from learnhub.domain.common.exceptions import ValidationError
from learnhub.domain.content.value_objects import CodeExample


def test_from_primitive_keeps_optional_description() -> None:
    example = CodeExample.from_primitive({"language": "python", "code": "print(1)"})

    assert example.description is None
    assert example.to_primitive() == {
        "language": "python",
        "code": "print(1)",
        "description": None,
    }


def test_empty_language_is_rejected() -> None:
    with pytest.raises(ValidationError, match="language cannot be empty"):
        CodeExample(language=" ", code="print(1)")


def test_equality_by_value() -> None:
    assert CodeExample("python", "x = 1") == CodeExample("python", "x = 1")
    assert CodeExample("python", "x = 1") != CodeExample("python", "x = 2")
