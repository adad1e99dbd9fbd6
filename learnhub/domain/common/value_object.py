"""Value objects: immutable, compared by their fields."""

from abc import ABC, abstractmethod


class ValueObject(ABC):
    """
    Base for value objects.

    Subclasses are ``@dataclass(frozen=True)``, which supplies field-wise
    equality and hashing, and validate in ``__post_init__``.
    """

    @abstractmethod
    def to_primitive(self) -> object:
        """Plain data stored in the database and in event payloads."""
