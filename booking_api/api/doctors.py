"""Doctor endpoints (/api/doctors)."""
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status

from booking_api.api.dependencies import (
    cached_json,
    get_doctor_repository,
    get_response_cache,
)
from booking_api.api.models import DoctorCreate, DoctorUpdate, ErrorResponse
from booking_api.api.responses import (
    collection_envelope,
    paginated_envelope,
    record_envelope,
)
from booking_api.cache import ResponseCache
from booking_api.logging_config import get_logger
from booking_api.pagination import paginate_results
from booking_api.store import DoctorRepository
from booking_api.validation import validate_doctor_create, validate_pagination

logger = get_logger(__name__)

router = APIRouter(
    prefix="/api/doctors",
    tags=["Doctors"],
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


@router.get("")
def list_doctors(
    request: Request,
    page: Optional[str] = Query(None, description="Page number (>= 1)"),
    limit: Optional[str] = Query(None, description="Page size (1-100)"),
    doctors: DoctorRepository = Depends(get_doctor_repository),
    cache: ResponseCache = Depends(get_response_cache),
):
    """List doctors, paginated."""
    def build():
        page_number, page_size = validate_pagination(page, limit)
        return paginated_envelope(
            "Doctors retrieved successfully",
            paginate_results(doctors.list_all(), page_number, page_size),
        )

    return cached_json(request, cache, build)


@router.get("/specialization/{specialization}")
def doctors_by_specialization(
    specialization: str,
    request: Request,
    doctors: DoctorRepository = Depends(get_doctor_repository),
    cache: ResponseCache = Depends(get_response_cache),
):
    """Doctors whose specialization contains the given text (case-insensitive)."""
    def build():
        return collection_envelope(
            f"Doctors found for specialization: {specialization}",
            doctors.find_by_specialization(specialization),
        )

    return cached_json(request, cache, build)


@router.get("/{doctor_id}")
def get_doctor(
    doctor_id: int,
    doctors: DoctorRepository = Depends(get_doctor_repository),
):
    return record_envelope("Doctor retrieved successfully", doctors.get(doctor_id))


@router.post("", status_code=status.HTTP_201_CREATED)
def add_doctor(
    payload: DoctorCreate,
    doctors: DoctorRepository = Depends(get_doctor_repository),
    cache: ResponseCache = Depends(get_response_cache),
):
    """
    Add a doctor.

    name, specialization and timings are required. experience and
    location default to "Not specified", rating and consultationFee to 0.
    """
    doctor = doctors.add(validate_doctor_create(payload.model_dump()))
    cache.clear()
    logger.info("doctor_added", doctor_id=doctor["id"])
    return record_envelope("Doctor added successfully", doctor)


@router.put("/{doctor_id}")
def update_doctor(
    doctor_id: int,
    payload: DoctorUpdate,
    doctors: DoctorRepository = Depends(get_doctor_repository),
    cache: ResponseCache = Depends(get_response_cache),
):
    """Shallow-merge the supplied fields into the doctor. Null fields are ignored."""
    changes = payload.model_dump(exclude_unset=True, exclude_none=True)
    doctor = doctors.update(doctor_id, changes)
    cache.clear()
    logger.info("doctor_updated", doctor_id=doctor_id, fields=sorted(changes))
    return record_envelope("Doctor updated successfully", doctor)


@router.delete("/{doctor_id}")
def delete_doctor(
    doctor_id: int,
    doctors: DoctorRepository = Depends(get_doctor_repository),
    cache: ResponseCache = Depends(get_response_cache),
):
    """Remove the doctor. Existing appointments keep their doctor_id."""
    doctor = doctors.delete(doctor_id)
    cache.clear()
    logger.info("doctor_deleted", doctor_id=doctor_id)
    return record_envelope("Doctor deleted successfully", doctor)
