"""Request validation with itemized error messages.

Every rule that fails adds one message; if any rule fails a
ValidationFailed is raised before the store is touched.
"""
import re
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from booking_api import config
from booking_api.errors import ValidationFailed
from booking_api.state import AppointmentStatus, INITIAL_STATUSES

DATE_PATTERN = re.compile(r'^\d{4}-\d{2}-\d{2}$')
TIME_PATTERN = re.compile(r'^([0-1]?[0-9]|2[0-3]):[0-5][0-9] (AM|PM)$')

STATUS_VALUES = [status.value for status in AppointmentStatus]


def _missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _to_int(value: Any) -> Optional[int]:
    """Integer value of ``value``, or None if it is not a whole number."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None


def is_valid_date(value: str) -> bool:
    """YYYY-MM-DD and a real calendar date."""
    if not isinstance(value, str) or not DATE_PATTERN.match(value):
        return False
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        return False
    return True


def is_valid_time(value: str) -> bool:
    """Slot label like '9:00 AM' or '10:30 PM'."""
    return isinstance(value, str) and TIME_PATTERN.match(value) is not None


def _check_formats(data: Dict[str, Any], errors: List[str]) -> Dict[str, Any]:
    """Format rules shared by create and update. Returns coerced values."""
    cleaned: Dict[str, Any] = {}

    if not _missing(data.get("date")):
        if is_valid_date(data["date"]):
            cleaned["date"] = data["date"]
        else:
            errors.append("Date must be in YYYY-MM-DD format")

    if not _missing(data.get("time")):
        if is_valid_time(data["time"]):
            cleaned["time"] = data["time"]
        else:
            errors.append("Time must be in HH:MM AM/PM format")

    for field, label in (("doctor_id", "Doctor ID"), ("patient_id", "Patient ID")):
        if not _missing(data.get(field)):
            number = _to_int(data[field])
            if number is None:
                errors.append(f"{label} must be a number")
            else:
                cleaned[field] = number

    return cleaned


def validate_appointment_create(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate a booking request.

    Args:
        data: Raw request body fields

    Returns:
        Cleaned appointment data (ids as ints, reason defaulted)

    Raises:
        ValidationFailed: With every violated rule listed
    """
    errors: List[str] = []

    for field, message in (
        ("doctor_id", "Doctor ID is required"),
        ("patient_id", "Patient ID is required"),
        ("date", "Date is required"),
        ("time", "Time is required"),
    ):
        if _missing(data.get(field)):
            errors.append(message)

    cleaned = _check_formats(data, errors)

    status = data.get("status")
    if not _missing(status):
        allowed = [s.value for s in AppointmentStatus if s in INITIAL_STATUSES]
        if status not in allowed:
            errors.append(f"Status must be one of: {', '.join(allowed)}")
        else:
            cleaned["status"] = status

    if errors:
        raise ValidationFailed(errors)

    cleaned["reason"] = data.get("reason") or config.DEFAULT_REASON
    return cleaned


def validate_appointment_update(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate a partial appointment update.

    Only supplied fields are checked; the result holds just those fields.
    """
    errors: List[str] = []

    for field, label in (
        ("doctor_id", "Doctor ID"),
        ("patient_id", "Patient ID"),
        ("date", "Date"),
        ("time", "Time"),
    ):
        if field in data and _missing(data[field]):
            errors.append(f"{label} cannot be empty")

    cleaned = _check_formats(data, errors)

    if "status" in data:
        if data["status"] not in STATUS_VALUES:
            errors.append(f"Status must be one of: {', '.join(STATUS_VALUES)}")
        else:
            cleaned["status"] = data["status"]

    if "reason" in data:
        cleaned["reason"] = data["reason"]

    if errors:
        raise ValidationFailed(errors)

    return cleaned


def validate_doctor_create(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate a new doctor and fill in defaults.

    Raises:
        ValidationFailed: If name, specialization or timings is missing
    """
    errors: List[str] = []
    if _missing(data.get("name")):
        errors.append("Name is required")
    if _missing(data.get("specialization")):
        errors.append("Specialization is required")
    if _missing(data.get("timings")):
        errors.append("Timings are required")

    if errors:
        raise ValidationFailed(errors)

    return {
        "name": data["name"],
        "specialization": data["specialization"],
        "experience": data.get("experience") or config.NOT_SPECIFIED,
        "timings": data["timings"],
        "location": data.get("location") or config.NOT_SPECIFIED,
        "rating": data.get("rating") or 0,
        "consultationFee": data.get("consultationFee") or 0,
    }


def validate_pagination(page: Any = None, limit: Any = None) -> Tuple[int, int]:
    """
    Parse page/limit query parameters.

    Returns:
        (page, limit) as ints, defaults applied

    Raises:
        ValidationFailed: Page not a positive integer, or limit outside 1..MAX_LIMIT
    """
    page_value = config.DEFAULT_PAGE if _missing(page) else _to_int(page)
    if page_value is None or page_value < 1:
        message = "Page must be a positive number"
        raise ValidationFailed([message], message=message)

    limit_value = config.DEFAULT_LIMIT if _missing(limit) else _to_int(limit)
    if limit_value is None or limit_value < 1 or limit_value > config.MAX_LIMIT:
        message = f"Limit must be between 1 and {config.MAX_LIMIT}"
        raise ValidationFailed([message], message=message)

    return page_value, limit_value


def parse_id_filter(value: Any, label: str) -> Optional[int]:
    """
    Parse an optional numeric query filter.

    Returns:
        The id, or None when the filter was not supplied

    Raises:
        ValidationFailed: Value present but not a number
    """
    if _missing(value):
        return None
    number = _to_int(value)
    if number is None:
        raise ValidationFailed([f"{label} must be a number"])
    return number
