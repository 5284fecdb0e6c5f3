"""Exception taxonomy for the booking API.

Each exception carries the HTTP status it maps to. The API layer turns
them into error envelopes (see booking_api.api.errors).
"""
from typing import List, Optional


class BookingError(Exception):
    """Base class for all booking API errors."""
    status_code = 500
    message = "Internal server error"

    def __init__(self, error: str, message: Optional[str] = None):
        super().__init__(error)
        self.error = error
        if message is not None:
            self.message = message


class ValidationFailed(BookingError):
    """Raised when a request breaks one or more validation rules."""
    status_code = 400
    message = "Validation failed"

    def __init__(self, errors: List[str], message: Optional[str] = None):
        super().__init__("; ".join(errors), message)
        self.errors = list(errors)


class InvalidTransitionError(ValidationFailed):
    """Raised when an appointment status change is not allowed."""

    def __init__(self, current: str, intended: str):
        super().__init__(
            [f"Cannot change status from '{current}' to '{intended}'"],
            message="Invalid status transition",
        )
        self.current = current
        self.intended = intended


class NotFoundError(BookingError):
    """Raised when no record matches an identifier."""
    status_code = 404

    def __init__(self, entity: str, record_id):
        super().__init__(
            f"No {entity.lower()} found with ID: {record_id}",
            message=f"{entity} not found",
        )
        self.entity = entity
        self.record_id = record_id


class SlotConflictError(BookingError):
    """Raised when a doctor's (date, time) slot is already taken."""
    status_code = 409

    def __init__(self, date: str, time: str):
        super().__init__(
            f"The selected time slot ({date} at {time}) is already booked",
            message="Time slot not available",
        )
        self.date = date
        self.time = time
