"""
Domain layer exceptions.

These exceptions represent domain-level errors that occur when
business rules are violated or domain invariants are broken.
They are translated to HTTP responses by the application shell.
"""


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain exceptions should inherit from this class
    so they can be caught and handled uniformly.
    """

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ValidationError(DomainError):
    """
    Raised when domain validation fails.

    Example: A blank word, a decreasing review interval table.
    """

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field
        self.value = value
