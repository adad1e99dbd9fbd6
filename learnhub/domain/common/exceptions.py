"""
Domain errors.

Raised when an aggregate refuses an operation. The HTTP layer answers
them with 400.
"""


class DomainError(Exception):
    """Base exception for all domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(DomainError):
    """An attribute value is not acceptable, e.g. an empty title."""

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


class BusinessRuleViolationError(DomainError):
    """The current state forbids the operation, e.g. publishing twice."""

    def __init__(self, rule: str, message: str | None = None) -> None:
        super().__init__(message or f"Business rule violated: {rule}")
        self.rule = rule
