"""Content domain exceptions."""

from learnhub.domain.common.exceptions import BusinessRuleViolationError
from learnhub.domain.common.value_objects import ContentId


class InvalidContentTransitionError(BusinessRuleViolationError):
    """Raised when a workflow transition is not allowed from the current status."""

    def __init__(self, content_id: ContentId, rule: str, message: str) -> None:
        super().__init__(rule, message)
        self.content_id = content_id


class ContentAlreadyPublishedError(InvalidContentTransitionError):
    def __init__(self, content_id: ContentId) -> None:
        super().__init__(content_id, "publish", "Content is already published")


class ContentNotPublishedError(InvalidContentTransitionError):
    def __init__(self, content_id: ContentId) -> None:
        super().__init__(content_id, "unpublish", "Content is not published")


class ContentAlreadyArchivedError(InvalidContentTransitionError):
    def __init__(self, content_id: ContentId) -> None:
        super().__init__(content_id, "archive", "Content is already archived")
