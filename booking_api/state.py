"""Appointment status lifecycle.

pending -> confirmed -> cancelled, with cancelled terminal.
A cancelled appointment no longer occupies its slot.
"""
from enum import Enum
from typing import Dict, FrozenSet, Union


class AppointmentStatus(str, Enum):
    """Discrete appointment statuses."""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


# Statuses that count against the one-booking-per-slot rule
ACTIVE_STATUSES: FrozenSet[AppointmentStatus] = frozenset({
    AppointmentStatus.PENDING,
    AppointmentStatus.CONFIRMED,
})

# Statuses accepted when an appointment is first booked
INITIAL_STATUSES: FrozenSet[AppointmentStatus] = ACTIVE_STATUSES


# Current status -> allowed next statuses
VALID_TRANSITIONS: Dict[AppointmentStatus, FrozenSet[AppointmentStatus]] = {
    AppointmentStatus.PENDING: frozenset({
        AppointmentStatus.CONFIRMED,
        AppointmentStatus.CANCELLED,
    }),
    AppointmentStatus.CONFIRMED: frozenset({
        AppointmentStatus.CANCELLED,
    }),
    AppointmentStatus.CANCELLED: frozenset(),
}


def is_active(status: Union[str, AppointmentStatus, None]) -> bool:
    """True if the status still occupies a slot."""
    return status != AppointmentStatus.CANCELLED.value


def validate_transition(
    current: Union[str, AppointmentStatus],
    intended: Union[str, AppointmentStatus]
) -> bool:
    """
    Validate a status change.

    Staying in the same status is always allowed.

    Args:
        current: Status the appointment has now
        intended: Status requested by the caller

    Returns:
        True if the transition is allowed

    Example:
        >>> validate_transition("pending", "confirmed")
        True
        >>> validate_transition("cancelled", "pending")
        False
    """
    current = AppointmentStatus(current)
    intended = AppointmentStatus(intended)
    if current == intended:
        return True
    return intended in VALID_TRANSITIONS.get(current, frozenset())
