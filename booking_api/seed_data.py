"""Sample records loaded into the in-memory stores on startup."""

DOCTORS = [
    {
        "id": 1,
        "name": "Dr. Sarah Johnson",
        "specialization": "Cardiology",
        "experience": "15 years",
        "timings": "9:00 AM - 5:00 PM",
        "location": "City Medical Center",
        "rating": 4.8,
        "consultationFee": 150,
    },
    {
        "id": 2,
        "name": "Dr. Michael Chen",
        "specialization": "Neurology",
        "experience": "12 years",
        "timings": "10:00 AM - 6:00 PM",
        "location": "Neurology Institute",
        "rating": 4.6,
        "consultationFee": 200,
    },
    {
        "id": 3,
        "name": "Dr. Emily Rodriguez",
        "specialization": "Pediatrics",
        "experience": "8 years",
        "timings": "8:00 AM - 4:00 PM",
        "location": "Children's Hospital",
        "rating": 4.9,
        "consultationFee": 120,
    },
    {
        "id": 4,
        "name": "Dr. James Wilson",
        "specialization": "Orthopedics",
        "experience": "20 years",
        "timings": "9:00 AM - 7:00 PM",
        "location": "Sports Medicine Center",
        "rating": 4.7,
        "consultationFee": 180,
    },
    {
        "id": 5,
        "name": "Dr. Lisa Thompson",
        "specialization": "Dermatology",
        "experience": "10 years",
        "timings": "11:00 AM - 7:00 PM",
        "location": "Skin Care Clinic",
        "rating": 4.5,
        "consultationFee": 140,
    },
]

APPOINTMENTS = [
    {
        "id": 1,
        "doctor_id": 1,
        "patient_id": 101,
        "date": "2024-01-15",
        "time": "10:00 AM",
        "status": "confirmed",
        "reason": "Heart checkup",
        "createdAt": "2024-01-10T10:00:00Z",
    },
    {
        "id": 2,
        "doctor_id": 2,
        "patient_id": 102,
        "date": "2024-01-16",
        "time": "2:00 PM",
        "status": "pending",
        "reason": "Headache consultation",
        "createdAt": "2024-01-11T14:30:00Z",
    },
    {
        "id": 3,
        "doctor_id": 3,
        "patient_id": 103,
        "date": "2024-01-17",
        "time": "9:00 AM",
        "status": "confirmed",
        "reason": "Child vaccination",
        "createdAt": "2024-01-12T09:15:00Z",
    },
    {
        "id": 4,
        "doctor_id": 1,
        "patient_id": 104,
        "date": "2024-01-18",
        "time": "3:00 PM",
        "status": "cancelled",
        "reason": "ECG test",
        "createdAt": "2024-01-13T16:45:00Z",
    },
    {
        "id": 5,
        "doctor_id": 4,
        "patient_id": 105,
        "date": "2024-01-19",
        "time": "11:00 AM",
        "status": "confirmed",
        "reason": "Knee pain",
        "createdAt": "2024-01-14T11:20:00Z",
    },
]
