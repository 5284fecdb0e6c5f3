"""Slot conflict detection.

A slot is a (doctor, date, time) triple. Only active appointments
(pending or confirmed) occupy a slot; cancelled ones never do.
"""
from typing import Any, Dict, List, Optional, Sequence

from booking_api.state import is_active

Record = Dict[str, Any]


def find_conflicts(
    appointments: Sequence[Record],
    doctor_id: int,
    date: str,
    time: str,
    exclude_id: Optional[int] = None
) -> List[Record]:
    """
    Active appointments occupying the given slot.

    Date and time are compared as exact strings.

    Args:
        appointments: Appointments to search
        doctor_id: Doctor owning the slot
        date: Date string (YYYY-MM-DD)
        time: Time label (e.g. "9:00 AM")
        exclude_id: Appointment to ignore (the one being updated)

    Returns:
        Conflicting appointments, possibly empty
    """
    return [
        apt for apt in appointments
        if apt.get("id") != exclude_id
        and apt.get("doctor_id") == doctor_id
        and apt.get("date") == date
        and apt.get("time") == time
        and is_active(apt.get("status"))
    ]


def is_slot_available(
    appointments: Sequence[Record],
    doctor_id: int,
    date: str,
    time: str,
    exclude_id: Optional[int] = None
) -> bool:
    """False iff an active appointment already holds the slot."""
    return not find_conflicts(appointments, doctor_id, date, time, exclude_id)
