"""Custom exception hierarchy for the learnhub application."""


class LearnhubError(Exception):
    """Base exception for all learnhub application errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(LearnhubError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class ContentNotFoundError(NotFoundError):
    """Content not found error."""

    def __init__(self, content_id: int | None = None, *, message: str | None = None) -> None:
        """Initialize with content ID or custom message."""
        self.content_id = content_id
        if message:
            super().__init__(message)
        elif content_id is not None:
            super().__init__(f"Content with id {content_id} not found")
        else:
            super().__init__("Content not found")


class TopicNotFoundError(NotFoundError):
    """Topic not found error."""

    def __init__(self, topic_id: int | None = None, *, message: str | None = None) -> None:
        """Initialize with topic ID or custom message."""
        self.topic_id = topic_id
        if message:
            super().__init__(message)
        elif topic_id is not None:
            super().__init__(f"Topic with id {topic_id} not found")
        else:
            super().__init__("Topic not found")


class ConcurrencyConflictError(LearnhubError):
    """The stored record changed since it was loaded (optimistic lock failure)."""

    def __init__(self, content_id: int, expected_version: int, actual_version: int | None) -> None:
        """Initialize with the versions that did not match and 409 status code."""
        self.content_id = content_id
        self.expected_version = expected_version
        self.actual_version = actual_version
        super().__init__(
            f"Content {content_id} was modified concurrently "
            f"(expected version {expected_version}, found {actual_version})",
            status_code=409,
        )


class TopicSlugConflictError(LearnhubError):
    """A topic with the same slug already exists."""

    def __init__(self, slug: str) -> None:
        """Initialize with the clashing slug and 409 status code."""
        self.slug = slug
        super().__init__(f"Topic with slug '{slug}' already exists", status_code=409)
