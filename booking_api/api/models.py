"""Pydantic models for API request bodies and error responses.

Request fields are all optional at the schema level: presence and format
rules live in booking_api.validation so that every violated rule is
reported in one itemized list.
"""
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt

# Strict so JSON booleans are rejected instead of read as 0/1
Number = Union[StrictInt, StrictFloat]
Identifier = Union[StrictInt, str]


class DoctorCreate(BaseModel):
    """Request schema for POST /api/doctors."""
    name: Optional[str] = Field(None, description="Full name", examples=["Dr. Sarah Johnson"])
    specialization: Optional[str] = Field(None, examples=["Cardiology"])
    experience: Optional[str] = Field(None, description="Free text", examples=["15 years"])
    timings: Optional[str] = Field(None, description="Free text", examples=["9:00 AM - 5:00 PM"])
    location: Optional[str] = Field(None, examples=["City Medical Center"])
    rating: Optional[Number] = Field(None, examples=[4.8])
    consultationFee: Optional[Number] = Field(None, examples=[150])

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Dr. Sarah Johnson",
                "specialization": "Cardiology",
                "experience": "15 years",
                "timings": "9:00 AM - 5:00 PM",
                "location": "City Medical Center",
                "rating": 4.8,
                "consultationFee": 150
            }
        }
    )


class DoctorUpdate(DoctorCreate):
    """Request schema for PUT /api/doctors/{id}. Only supplied fields change."""

    model_config = ConfigDict(
        json_schema_extra={"example": {"rating": 4.9, "consultationFee": 160}}
    )


class AppointmentCreate(BaseModel):
    """Request schema for POST /api/appointments."""
    doctor_id: Optional[Identifier] = Field(None, examples=[1])
    patient_id: Optional[Identifier] = Field(None, examples=[200])
    date: Optional[str] = Field(None, description="YYYY-MM-DD", examples=["2024-02-01"])
    time: Optional[str] = Field(None, description="HH:MM AM/PM", examples=["9:00 AM"])
    reason: Optional[str] = Field(None, examples=["Heart checkup"])
    status: Optional[str] = Field(None, description="pending (default) or confirmed")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "doctor_id": 1,
                "patient_id": 200,
                "date": "2024-02-01",
                "time": "9:00 AM",
                "reason": "Heart checkup"
            }
        }
    )


class AppointmentUpdate(AppointmentCreate):
    """Request schema for PUT /api/appointments/{id}. Only supplied fields change."""

    model_config = ConfigDict(
        json_schema_extra={"example": {"status": "confirmed"}}
    )


class ErrorResponse(BaseModel):
    """Error envelope."""
    success: bool = Field(False, description="Always false for errors")
    message: str = Field(..., description="Human-readable summary")
    error: Optional[str] = Field(None, description="Error detail")
    errors: Optional[List[str]] = Field(None, description="Itemized validation errors")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": False,
                "message": "Time slot not available",
                "error": "The selected time slot (2024-02-01 at 9:00 AM) is already booked"
            }
        }
    )
