"""Port for the shared read cache."""

from typing import Any, Protocol


class CacheProtocol(Protocol):
    """
    Key/value cache shared by query handlers.

    Implementations decide expiry; callers only read, write and
    invalidate by key.
    """

    def get(self, key: str) -> Any | None:  # noqa: ANN401
        """Return the cached value, or None on a miss."""
        ...

    def set(self, key: str, value: Any) -> None:  # noqa: ANN401
        """Store a value under key."""
        ...

    def delete(self, *keys: str) -> None:
        """Remove the given keys; unknown keys are ignored."""
        ...

    def clear(self) -> None:
        """Drop every entry."""
        ...
