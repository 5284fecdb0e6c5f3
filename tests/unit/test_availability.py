"""Tests for slot conflict detection."""
from booking_api.availability import find_conflicts, is_slot_available

APPOINTMENTS = [
    {"id": 1, "doctor_id": 1, "date": "2024-01-15", "time": "10:00 AM", "status": "confirmed"},
    {"id": 2, "doctor_id": 1, "date": "2024-01-16", "time": "10:00 AM", "status": "pending"},
    {"id": 3, "doctor_id": 1, "date": "2024-01-18", "time": "3:00 PM", "status": "cancelled"},
    {"id": 4, "doctor_id": 2, "date": "2024-01-15", "time": "10:00 AM", "status": "confirmed"},
]


def test_confirmed_appointment_blocks_slot():
    assert is_slot_available(APPOINTMENTS, 1, "2024-01-15", "10:00 AM") is False


def test_pending_appointment_blocks_slot():
    assert is_slot_available(APPOINTMENTS, 1, "2024-01-16", "10:00 AM") is False


def test_cancelled_appointment_frees_slot():
    assert is_slot_available(APPOINTMENTS, 1, "2024-01-18", "3:00 PM") is True


def test_other_doctor_same_time_is_free():
    assert is_slot_available(APPOINTMENTS, 3, "2024-01-15", "10:00 AM") is True


def test_time_is_compared_as_exact_string():
    assert is_slot_available(APPOINTMENTS, 1, "2024-01-15", "10:00 PM") is True
    assert is_slot_available(APPOINTMENTS, 1, "2024-01-15", "10:00AM") is True


def test_exclude_id_ignores_the_appointment_being_updated():
    assert is_slot_available(APPOINTMENTS, 1, "2024-01-15", "10:00 AM", exclude_id=1) is True
    assert is_slot_available(APPOINTMENTS, 1, "2024-01-15", "10:00 AM", exclude_id=2) is False


def test_find_conflicts_returns_holders():
    conflicts = find_conflicts(APPOINTMENTS, 2, "2024-01-15", "10:00 AM")
    assert [apt["id"] for apt in conflicts] == [4]


def test_many_cancelled_appointments_can_share_a_slot():
    cancelled = [
        {"id": i, "doctor_id": 1, "date": "2024-03-01", "time": "9:00 AM", "status": "cancelled"}
        for i in range(1, 4)
    ]
    assert is_slot_available(cancelled, 1, "2024-03-01", "9:00 AM") is True
