"""Application error taxonomy.

Every error carries the HTTP status it maps to and a single human-readable
message. The exception handlers in ``catalog.api.errors`` turn them into the
``{success: false, message}`` envelope.
"""


class AppError(Exception):
    """Base class for errors that are rendered as an error envelope."""

    status_code: int = 500
    default_message: str = "An unexpected error occurred"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(AppError):
    """The referenced resource does not exist."""

    status_code = 404
    default_message = "Resource not found"


class ValidationError(AppError):
    """One or more submitted fields failed their rule.

    Args:
        errors: Field-level errors as ``(field, reason)`` pairs
    """

    status_code = 422
    default_message = "Validation failed"

    def __init__(self, errors: list[tuple[str, str]]):
        self.errors = errors
        super().__init__(format_field_errors(errors))


class UnexpectedError(AppError):
    """Backing store or server internals failed."""


def format_field_errors(errors: list[tuple[str, str]]) -> str:
    """Collapse field-level errors into one message string."""
    if not errors:
        return ValidationError.default_message
    details = "; ".join(f"{field}: {reason}" for field, reason in errors)
    return f"{ValidationError.default_message}: {details}"
