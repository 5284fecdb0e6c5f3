"""Appointment endpoints (/api/appointments)."""
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status

from booking_api.api.dependencies import (
    cached_json,
    get_appointment_repository,
    get_doctor_repository,
    get_response_cache,
)
from booking_api.api.models import AppointmentCreate, AppointmentUpdate, ErrorResponse
from booking_api.api.responses import (
    collection_envelope,
    paginated_envelope,
    record_envelope,
)
from booking_api.cache import ResponseCache
from booking_api.logging_config import get_logger
from booking_api.pagination import paginate_results
from booking_api.store import AppointmentRepository, DoctorRepository
from booking_api.validation import (
    parse_id_filter,
    validate_appointment_create,
    validate_appointment_update,
    validate_pagination,
)

logger = get_logger(__name__)

router = APIRouter(
    prefix="/api/appointments",
    tags=["Appointments"],
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


@router.post("", status_code=status.HTTP_201_CREATED)
def book_appointment(
    payload: AppointmentCreate,
    doctors: DoctorRepository = Depends(get_doctor_repository),
    appointments: AppointmentRepository = Depends(get_appointment_repository),
    cache: ResponseCache = Depends(get_response_cache),
):
    """
    Book an appointment.

    Raises:
        400: Missing or malformed fields
        404: Doctor does not exist
        409: Doctor already has an active appointment in that slot
    """
    data = validate_appointment_create(payload.model_dump(exclude_unset=True))
    doctors.get(data["doctor_id"])

    appointment = appointments.book(data)
    cache.clear()
    logger.info(
        "appointment_booked",
        appointment_id=appointment["id"],
        doctor_id=appointment["doctor_id"],
        date=appointment["date"],
        time=appointment["time"],
    )
    return record_envelope("Appointment booked successfully", appointment)


@router.get("")
def list_appointments(
    request: Request,
    doctor_id: Optional[str] = Query(None, description="Filter by doctor (highest priority)"),
    patient_id: Optional[str] = Query(None, description="Filter by patient"),
    appointment_status: Optional[str] = Query(None, alias="status", description="Filter by status"),
    page: Optional[str] = Query(None, description="Page number (>= 1)"),
    limit: Optional[str] = Query(None, description="Page size (1-100)"),
    appointments: AppointmentRepository = Depends(get_appointment_repository),
    cache: ResponseCache = Depends(get_response_cache),
):
    """
    List appointments with at most one filter applied.

    When several filters are given only the first of
    doctor_id, patient_id, status is used.
    """
    def build():
        page_number, page_size = validate_pagination(page, limit)
        matches = appointments.filter(
            doctor_id=parse_id_filter(doctor_id, "Doctor ID"),
            patient_id=parse_id_filter(patient_id, "Patient ID"),
            status=appointment_status,
        )
        return paginated_envelope(
            "Appointments retrieved successfully",
            paginate_results(matches, page_number, page_size),
        )

    return cached_json(request, cache, build)


@router.get("/doctor/{doctor_id}")
def doctor_appointments(
    doctor_id: int,
    request: Request,
    appointments: AppointmentRepository = Depends(get_appointment_repository),
    cache: ResponseCache = Depends(get_response_cache),
):
    def build():
        return collection_envelope(
            f"Appointments retrieved for doctor ID: {doctor_id}",
            appointments.by_doctor(doctor_id),
        )

    return cached_json(request, cache, build)


@router.get("/patient/{patient_id}")
def patient_appointments(
    patient_id: int,
    request: Request,
    appointments: AppointmentRepository = Depends(get_appointment_repository),
    cache: ResponseCache = Depends(get_response_cache),
):
    def build():
        return collection_envelope(
            f"Appointments retrieved for patient ID: {patient_id}",
            appointments.by_patient(patient_id),
        )

    return cached_json(request, cache, build)


@router.get("/{appointment_id}")
def get_appointment(
    appointment_id: int,
    appointments: AppointmentRepository = Depends(get_appointment_repository),
):
    return record_envelope(
        "Appointment retrieved successfully", appointments.get(appointment_id)
    )


@router.put("/{appointment_id}")
def update_appointment(
    appointment_id: int,
    payload: AppointmentUpdate,
    appointments: AppointmentRepository = Depends(get_appointment_repository),
    cache: ResponseCache = Depends(get_response_cache),
):
    """
    Partially update an appointment.

    Moving it to another doctor/date/time re-checks the slot (the
    appointment itself does not count as a conflict).
    """
    changes = validate_appointment_update(payload.model_dump(exclude_unset=True))
    appointment = appointments.update(appointment_id, changes)
    cache.clear()
    logger.info("appointment_updated", appointment_id=appointment_id, fields=sorted(changes))
    return record_envelope("Appointment updated successfully", appointment)


@router.delete("/{appointment_id}")
def cancel_appointment(
    appointment_id: int,
    appointments: AppointmentRepository = Depends(get_appointment_repository),
    cache: ResponseCache = Depends(get_response_cache),
):
    """Cancel an appointment. The record is kept with status 'cancelled'."""
    appointment = appointments.cancel(appointment_id)
    cache.clear()
    logger.info("appointment_cancelled", appointment_id=appointment_id)
    return record_envelope("Appointment cancelled successfully", appointment)
