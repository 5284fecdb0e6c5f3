"""Shared test fixtures."""
import pytest
from fastapi.testclient import TestClient

from booking_api import seed_data
from booking_api.api_server import create_app
from booking_api.cache import ResponseCache
from booking_api.store import AppointmentRepository, DoctorRepository, RecordStore


@pytest.fixture
def doctor_repo() -> DoctorRepository:
    """Doctor repository seeded with the five sample doctors."""
    return DoctorRepository(RecordStore(seed_data.DOCTORS))


@pytest.fixture
def appointment_repo() -> AppointmentRepository:
    """Appointment repository seeded with the five sample appointments."""
    return AppointmentRepository(RecordStore(seed_data.APPOINTMENTS))


@pytest.fixture
def response_cache() -> ResponseCache:
    return ResponseCache(ttl=300, max_size=100)


@pytest.fixture
def app(doctor_repo, appointment_repo, response_cache):
    """Fresh app per test so writes never leak between tests."""
    return create_app(
        doctor_repo=doctor_repo,
        appointment_repo=appointment_repo,
        cache=response_cache,
    )


@pytest.fixture
def client(app):
    """Create FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def booking():
    """Factory for appointment request bodies."""
    def _make(**overrides):
        body = {
            "doctor_id": 1,
            "patient_id": 200,
            "date": "2024-02-01",
            "time": "9:00 AM",
        }
        body.update(overrides)
        return body
    return _make
