"""Test /api/appointments endpoints."""


def test_book_appointment(client, booking):
    response = client.post("/api/appointments", json=booking())

    assert response.status_code == 201
    data = response.json()
    assert data["success"] is True
    assert data["message"] == "Appointment booked successfully"
    appointment = data["data"]
    assert appointment["id"] == 6
    assert appointment["status"] == "pending"
    assert appointment["reason"] == "General consultation"
    assert "createdAt" in appointment


def test_double_booking_conflicts(client, booking):
    first = client.post("/api/appointments", json=booking())
    second = client.post("/api/appointments", json=booking(patient_id=201))

    assert first.status_code == 201
    assert second.status_code == 409
    data = second.json()
    assert data["success"] is False
    assert data["message"] == "Time slot not available"
    assert "2024-02-01 at 9:00 AM" in data["error"]


def test_same_time_other_doctor_is_fine(client, booking):
    client.post("/api/appointments", json=booking())
    response = client.post("/api/appointments", json=booking(doctor_id=2))
    assert response.status_code == 201


def test_cancel_then_rebook(client, booking):
    cancel = client.delete("/api/appointments/1")
    assert cancel.status_code == 200
    assert cancel.json()["data"]["status"] == "cancelled"

    response = client.post("/api/appointments", json=booking(
        doctor_id=1, date="2024-01-15", time="10:00 AM",
    ))
    assert response.status_code == 201


def test_cancel_keeps_record(client):
    client.delete("/api/appointments/2")

    response = client.get("/api/appointments/2")
    assert response.status_code == 200
    assert response.json()["data"]["status"] == "cancelled"


def test_cancel_already_cancelled(client):
    response = client.delete("/api/appointments/4")

    assert response.status_code == 400
    assert "already cancelled" in response.json()["errors"][0]


def test_cancel_not_found(client):
    assert client.delete("/api/appointments/99").status_code == 404


def test_book_unknown_doctor(client, booking):
    response = client.post("/api/appointments", json=booking(doctor_id=99))

    assert response.status_code == 404
    assert response.json()["message"] == "Doctor not found"


def test_book_validation_errors(client):
    response = client.post("/api/appointments", json={"date": "2024/02/01", "time": "9am"})

    assert response.status_code == 400
    errors = response.json()["errors"]
    assert "Doctor ID is required" in errors
    assert "Patient ID is required" in errors
    assert "Date must be in YYYY-MM-DD format" in errors
    assert "Time must be in HH:MM AM/PM format" in errors


def test_book_with_string_ids(client, booking):
    response = client.post("/api/appointments", json=booking(doctor_id="3", patient_id="300"))

    assert response.status_code == 201
    assert response.json()["data"]["doctor_id"] == 3
    assert response.json()["data"]["patient_id"] == 300


def test_book_with_boolean_ids(client, booking):
    response = client.post("/api/appointments", json=booking(doctor_id=True, patient_id=False))

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert any(error.startswith("doctor_id") for error in body["errors"])
    assert any(error.startswith("patient_id") for error in body["errors"])


def test_update_with_boolean_doctor_id(client):
    response = client.put("/api/appointments/2", json={"doctor_id": True})

    assert response.status_code == 400
    assert client.get("/api/appointments/2").json()["data"]["doctor_id"] == 2


def test_list_appointments_paginated(client):
    data = client.get("/api/appointments?page=2&limit=2").json()

    assert [apt["id"] for apt in data["results"]] == [3, 4]
    assert data["total"] == 5
    assert data["totalPages"] == 3
    assert data["next"] == {"page": 3, "limit": 2}
    assert data["previous"] == {"page": 1, "limit": 2}


def test_list_filter_by_status(client):
    data = client.get("/api/appointments?status=confirmed").json()
    assert [apt["id"] for apt in data["results"]] == [1, 3, 5]


def test_list_filter_by_patient(client):
    data = client.get("/api/appointments?patient_id=102").json()
    assert [apt["id"] for apt in data["results"]] == [2]


def test_list_filter_priority(client):
    """doctor_id wins; status is ignored."""
    data = client.get("/api/appointments?doctor_id=1&status=pending").json()

    assert [apt["id"] for apt in data["results"]] == [1, 4]
    assert {apt["status"] for apt in data["results"]} == {"confirmed", "cancelled"}


def test_list_non_numeric_doctor_filter(client):
    response = client.get("/api/appointments?doctor_id=abc")

    assert response.status_code == 400
    assert response.json()["errors"] == ["Doctor ID must be a number"]


def test_doctor_appointments(client):
    data = client.get("/api/appointments/doctor/1").json()

    assert data["message"] == "Appointments retrieved for doctor ID: 1"
    assert data["count"] == 2


def test_patient_appointments(client):
    data = client.get("/api/appointments/patient/105").json()

    assert data["count"] == 1
    assert data["data"][0]["doctor_id"] == 4


def test_get_appointment_not_found(client):
    response = client.get("/api/appointments/99")

    assert response.status_code == 404
    assert response.json()["error"] == "No appointment found with ID: 99"


def test_update_appointment_reason(client):
    response = client.put("/api/appointments/1", json={"reason": "Follow-up"})

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["reason"] == "Follow-up"
    assert data["date"] == "2024-01-15"


def test_update_into_taken_slot(client):
    response = client.put("/api/appointments/2", json={
        "doctor_id": 1, "date": "2024-01-15", "time": "10:00 AM",
    })
    assert response.status_code == 409


def test_update_time_only_is_checked(client, booking):
    client.post("/api/appointments", json=booking(doctor_id=1, date="2024-01-15", time="11:00 AM"))

    response = client.put("/api/appointments/1", json={"time": "11:00 AM"})
    assert response.status_code == 409


def test_update_keeping_own_slot(client):
    response = client.put("/api/appointments/1", json={
        "doctor_id": 1, "date": "2024-01-15", "time": "10:00 AM",
    })
    assert response.status_code == 200


def test_update_confirm_pending(client):
    response = client.put("/api/appointments/2", json={"status": "confirmed"})
    assert response.json()["data"]["status"] == "confirmed"


def test_update_cannot_reopen_cancelled(client):
    response = client.put("/api/appointments/4", json={"status": "pending"})

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid status transition"


def test_update_created_at_is_ignored(client):
    before = client.get("/api/appointments/1").json()["data"]["createdAt"]
    client.put("/api/appointments/1", json={"createdAt": "1999-01-01T00:00:00Z"})

    after = client.get("/api/appointments/1").json()["data"]["createdAt"]
    assert after == before


def test_update_bad_format(client):
    response = client.put("/api/appointments/1", json={"time": "25:00"})

    assert response.status_code == 400
    assert response.json()["errors"] == ["Time must be in HH:MM AM/PM format"]


def test_update_not_found(client):
    assert client.put("/api/appointments/99", json={"reason": "x"}).status_code == 404
