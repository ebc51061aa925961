"""
Domain layer exceptions.

Raised by entities and the review session when a record would break its
invariants or a drill action is not legal in the current state. The
application facade turns them into failed Results; the API layer answers
them with 400.
"""


class DomainError(Exception):
    """Base exception for all domain errors."""

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ValidationError(DomainError):
    """A record field is invalid, e.g. an empty word or meaning."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, {"field": field} if field else None)
        self.field = field


class BusinessRuleViolationError(DomainError):
    """
    A drill action was attempted in a state that does not allow it.

    Example: answering while no card is on screen.
    """

    def __init__(self, rule: str, message: str | None = None) -> None:
        super().__init__(message or f"Business rule violated: {rule}", {"rule": rule})
        self.rule = rule
