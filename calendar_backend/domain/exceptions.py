"""
Exception hierarchy for the event core.

Every error is local to a single request and carries a user-facing message.
Controllers translate these into HTTP responses; nothing here is retried.
"""

# Standard library imports
from typing import List, Optional


class EventServiceError(Exception):
    """Base exception for all event core errors."""

    def __init__(self, message: str, user_message: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or message


class BadScopeError(EventServiceError):
    """Raised when month or year on a scoped read is not an integer."""

    def __init__(self, message: str = "year or month is not a number"):
        super().__init__(message)


class ValidationFailedError(EventServiceError):
    """
    Raised when a create/update/delete payload fails validation.

    ``fields`` lists every failing field for logging; the user-facing message
    stays aggregated.
    """

    def __init__(self, fields: Optional[List[str]] = None):
        self.fields = list(fields or [])
        super().__init__(
            f"Validation failed for fields: {', '.join(self.fields) or 'unknown'}",
            user_message="All fields are required and must have appropriate formats",
        )


class EventNotFoundError(EventServiceError):
    """Raised when the target event of a mutation does not exist."""

    def __init__(self, event_id: int):
        self.event_id = event_id
        super().__init__(f"Event {event_id} not found", user_message="Event not found")


class ForbiddenError(EventServiceError):
    """Raised when the requester does not own the target event."""

    def __init__(self, event_id: int, user_id: str):
        self.event_id = event_id
        super().__init__(
            f"User {user_id} is not allowed to modify event {event_id}",
            user_message="You are not allowed to modify this event",
        )


class StoreUnavailableError(EventServiceError):
    """Raised when a call to the event store fails."""

    def __init__(self, operation: str, cause: Optional[BaseException] = None):
        self.operation = operation
        super().__init__(
            f"Event store failure during {operation}: {cause}",
            user_message="Unexpected error occurred",
        )
