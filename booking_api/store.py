"""In-memory record stores for doctors and appointments.

Pattern: a thin generic store (ordered list of dicts + monotonic id counter)
with domain repositories on top. Repositories are what the API layer talks
to, so swapping the store for a persistent one does not touch the
filtering, pagination or conflict logic.

Good for: single-process deployments and tests.
NOT for: multiple processes (state is per process and lost on restart).
"""
import copy
import logging
import threading
from datetime import datetime, UTC
from typing import Any, Dict, Iterable, List, Optional

from booking_api import config
from booking_api.availability import find_conflicts
from booking_api.errors import (
    InvalidTransitionError,
    NotFoundError,
    SlotConflictError,
    ValidationFailed,
)
from booking_api.filtering import filter_appointments, filter_by_field, match_specialization
from booking_api.state import AppointmentStatus, is_active, validate_transition

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


def _utc_timestamp() -> str:
    return datetime.now(UTC).isoformat().replace("+00:00", "Z")


class RecordStore:
    """
    Ordered, in-memory collection of records with store-assigned ids.

    Ids come from a counter that only moves forward, so an id is never
    handed out twice, even after deletions.

    All operations hold ``lock``. The lock is re-entrant: callers can hold
    it across several operations to make a check-then-write atomic.
    """

    def __init__(self, records: Optional[Iterable[Record]] = None):
        self.lock = threading.RLock()
        self._records: List[Record] = []
        self._next_id = 1
        if records:
            self.reset(records)

    def __len__(self) -> int:
        with self.lock:
            return len(self._records)

    def reset(self, records: Iterable[Record] = ()) -> None:
        """Replace all records. Records without an id get one assigned."""
        with self.lock:
            self._records = []
            self._next_id = 1
            for record in records:
                record = dict(record)
                if record.get("id") is None:
                    record["id"] = self._next_id
                self._records.append(record)
                self._next_id = max(self._next_id, int(record["id"]) + 1)

    def _index_of(self, record_id: int) -> Optional[int]:
        for index, record in enumerate(self._records):
            if record["id"] == record_id:
                return index
        return None

    def get_all(self) -> List[Record]:
        with self.lock:
            return copy.deepcopy(self._records)

    def get_by_id(self, record_id: int) -> Optional[Record]:
        with self.lock:
            index = self._index_of(record_id)
            if index is None:
                return None
            return copy.deepcopy(self._records[index])

    def filter_by(self, field: str, value: Any) -> List[Record]:
        with self.lock:
            return copy.deepcopy(filter_by_field(self._records, field, value))

    def insert(self, data: Record) -> Record:
        """Store a new record and return it with its assigned id."""
        with self.lock:
            record = {"id": self._next_id, **{k: v for k, v in data.items() if k != "id"}}
            self._next_id += 1
            self._records.append(record)
            return copy.deepcopy(record)

    def update(self, record_id: int, partial: Record) -> Optional[Record]:
        """
        Shallow-merge ``partial`` into a record.

        Supplied fields overwrite, omitted fields are kept. The id is
        never overwritten.

        Returns:
            Updated record, or None if no record has this id
        """
        with self.lock:
            index = self._index_of(record_id)
            if index is None:
                return None
            changes = {k: v for k, v in partial.items() if k != "id"}
            self._records[index] = {**self._records[index], **changes}
            return copy.deepcopy(self._records[index])

    def delete(self, record_id: int) -> Optional[Record]:
        """Remove a record. Returns the removed record or None."""
        with self.lock:
            index = self._index_of(record_id)
            if index is None:
                return None
            return self._records.pop(index)


class DoctorRepository:
    """Doctor operations over a RecordStore."""

    entity = "Doctor"

    def __init__(self, store: Optional[RecordStore] = None):
        self.store = store if store is not None else RecordStore()

    def list_all(self) -> List[Record]:
        return self.store.get_all()

    def get(self, doctor_id: int) -> Record:
        """
        Fetch a doctor.

        Raises:
            NotFoundError: If no doctor has this id
        """
        doctor = self.store.get_by_id(doctor_id)
        if doctor is None:
            raise NotFoundError(self.entity, doctor_id)
        return doctor

    def exists(self, doctor_id: int) -> bool:
        return self.store.get_by_id(doctor_id) is not None

    def add(self, data: Record) -> Record:
        doctor = self.store.insert(data)
        logger.debug("Doctor %s added", doctor["id"])
        return doctor

    def update(self, doctor_id: int, partial: Record) -> Record:
        doctor = self.store.update(doctor_id, partial)
        if doctor is None:
            raise NotFoundError(self.entity, doctor_id)
        return doctor

    def delete(self, doctor_id: int) -> Record:
        """Remove a doctor. Appointments referencing it are left as they are."""
        doctor = self.store.delete(doctor_id)
        if doctor is None:
            raise NotFoundError(self.entity, doctor_id)
        logger.debug("Doctor %s deleted", doctor_id)
        return doctor

    def find_by_specialization(self, query: str) -> List[Record]:
        return match_specialization(self.store.get_all(), query)


class AppointmentRepository:
    """
    Appointment operations over a RecordStore.

    Booking and rescheduling run the slot check and the write under the
    store lock, so two concurrent requests can never both take a slot.
    """

    entity = "Appointment"

    def __init__(self, store: Optional[RecordStore] = None):
        self.store = store if store is not None else RecordStore()

    def list_all(self) -> List[Record]:
        return self.store.get_all()

    def get(self, appointment_id: int) -> Record:
        appointment = self.store.get_by_id(appointment_id)
        if appointment is None:
            raise NotFoundError(self.entity, appointment_id)
        return appointment

    def by_doctor(self, doctor_id: int) -> List[Record]:
        return self.store.filter_by("doctor_id", doctor_id)

    def by_patient(self, patient_id: int) -> List[Record]:
        return self.store.filter_by("patient_id", patient_id)

    def by_status(self, status: str) -> List[Record]:
        return self.store.filter_by("status", status)

    def filter(
        self,
        doctor_id: Optional[int] = None,
        patient_id: Optional[int] = None,
        status: Optional[str] = None
    ) -> List[Record]:
        """Single-predicate filter (doctor_id > patient_id > status)."""
        return filter_appointments(self.store.get_all(), doctor_id, patient_id, status)

    def is_time_slot_available(
        self,
        doctor_id: int,
        date: str,
        time: str,
        exclude_id: Optional[int] = None
    ) -> bool:
        with self.store.lock:
            return not self._conflicts(doctor_id, date, time, exclude_id)

    def _conflicts(self, doctor_id, date, time, exclude_id=None) -> List[Record]:
        # Caller holds the store lock
        return find_conflicts(self.store.get_all(), doctor_id, date, time, exclude_id)

    def book(self, data: Record) -> Record:
        """
        Atomically check the slot and create the appointment.

        Args:
            data: doctor_id, patient_id, date, time, reason, optional status

        Returns:
            Created appointment with id, status and createdAt

        Raises:
            SlotConflictError: If an active appointment holds the slot
        """
        appointment = {
            **data,
            "status": data.get("status") or AppointmentStatus.PENDING.value,
            "reason": data.get("reason") or config.DEFAULT_REASON,
            "createdAt": _utc_timestamp(),
        }

        with self.store.lock:
            if is_active(appointment["status"]):
                conflicts = self._conflicts(
                    appointment["doctor_id"], appointment["date"], appointment["time"]
                )
                if conflicts:
                    logger.info(
                        "Slot conflict for doctor %s on %s at %s (held by %s)",
                        appointment["doctor_id"], appointment["date"], appointment["time"],
                        [apt["id"] for apt in conflicts],
                    )
                    raise SlotConflictError(appointment["date"], appointment["time"])
            return self.store.insert(appointment)

    def update(self, appointment_id: int, partial: Record) -> Record:
        """
        Partially update an appointment.

        When doctor_id, date or time change and the appointment stays
        active, the resulting slot is re-checked, ignoring this
        appointment itself. createdAt is never changed.

        Raises:
            NotFoundError: Unknown appointment
            InvalidTransitionError: Status change not allowed
            SlotConflictError: New slot already taken
        """
        changes = {k: v for k, v in partial.items() if k not in ("id", "createdAt")}

        with self.store.lock:
            current = self.get(appointment_id)

            new_status = changes.get("status")
            if new_status is not None and not validate_transition(current["status"], new_status):
                raise InvalidTransitionError(current["status"], new_status)

            merged = {**current, **changes}
            slot_changed = any(field in changes for field in ("doctor_id", "date", "time"))
            if slot_changed and is_active(merged.get("status")):
                if self._conflicts(merged["doctor_id"], merged["date"], merged["time"],
                                   exclude_id=appointment_id):
                    raise SlotConflictError(merged["date"], merged["time"])

            return self.store.update(appointment_id, changes)

    def cancel(self, appointment_id: int) -> Record:
        """
        Cancel an appointment (status change, the record is kept).

        Raises:
            NotFoundError: Unknown appointment
            ValidationFailed: Appointment already cancelled
        """
        with self.store.lock:
            current = self.get(appointment_id)
            if current["status"] == AppointmentStatus.CANCELLED.value:
                raise ValidationFailed(
                    [f"Appointment {appointment_id} is already cancelled"],
                    message="Appointment already cancelled",
                )
            return self.store.update(
                appointment_id, {"status": AppointmentStatus.CANCELLED.value}
            )
