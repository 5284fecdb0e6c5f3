"""Query filters over doctor and appointment collections."""
from typing import Any, Dict, List, Optional, Sequence

Record = Dict[str, Any]


def _supplied(value: Any) -> bool:
    return value is not None and value != ""


def filter_by_field(records: Sequence[Record], field: str, value: Any) -> List[Record]:
    """Records whose ``field`` equals ``value``, in original order."""
    return [record for record in records if record.get(field) == value]


def filter_appointments(
    records: Sequence[Record],
    doctor_id: Optional[int] = None,
    patient_id: Optional[int] = None,
    status: Optional[str] = None
) -> List[Record]:
    """
    Apply at most one appointment filter.

    Priority is doctor_id > patient_id > status. Only the highest-priority
    supplied filter is used; the others are ignored. With no filter the
    whole collection comes back.

    Args:
        records: Appointments in insertion order
        doctor_id: Keep appointments for this doctor
        patient_id: Keep appointments for this patient
        status: Keep appointments with this status

    Returns:
        Matching appointments, original order preserved
    """
    if _supplied(doctor_id):
        return filter_by_field(records, "doctor_id", doctor_id)
    if _supplied(patient_id):
        return filter_by_field(records, "patient_id", patient_id)
    if _supplied(status):
        return filter_by_field(records, "status", status)
    return list(records)


def match_specialization(doctors: Sequence[Record], query: str) -> List[Record]:
    """
    Doctors whose specialization contains ``query`` (case-insensitive).

    Doctors without a string specialization never match.
    """
    needle = query.lower()
    return [
        doctor for doctor in doctors
        if isinstance(doctor.get("specialization"), str)
        and needle in doctor["specialization"].lower()
    ]
