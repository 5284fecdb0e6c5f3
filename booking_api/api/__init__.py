"""API package initialization."""
from booking_api.api.models import (
    AppointmentCreate,
    AppointmentUpdate,
    DoctorCreate,
    DoctorUpdate,
    ErrorResponse,
)

__all__ = [
    "AppointmentCreate",
    "AppointmentUpdate",
    "DoctorCreate",
    "DoctorUpdate",
    "ErrorResponse",
]
