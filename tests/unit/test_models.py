"""Unit tests for data models."""

from datetime import datetime, timezone

import pytest

from medication_requests.data.models import Medication, MedicationRequest, ProcessingResult


def test_medication_from_dict_defaults():
    """Test that optional medication fields get defaults."""
    medication = Medication.from_dict({"id": 7, "name": "Cetirizine"})
    
    assert medication.description == ""
    assert medication.quantity == 0


def test_request_from_dict_attaches_shared_medication():
    """Test that the given medication instance is attached, not copied."""
    medication = Medication(id=3, name="Amoxicillin", description="Antibiotic", quantity=80)
    data = {
        "id": 3,
        "patient_name": "Ivana Lukić",
        "patient_email": "ivana@example.com",
        "doctor_name": "Dr. Janković",
        "diagnosis": "Infection",
        "quantity": 15,
        "request_date": "2024-03-13T09:00:00+00:00",
        "medication_id": 3,
    }
    
    first = MedicationRequest.from_dict(data, medication=medication)
    second = MedicationRequest.from_dict({**data, "id": 5}, medication=medication)
    
    assert first.medication is second.medication
    assert first.request_date == datetime(2024, 3, 13, 9, 0, tzinfo=timezone.utc)


def test_request_to_dict_stores_medication_by_id():
    """Test that serialized requests reference their medication by ID only."""
    request = MedicationRequest(
        id=1,
        patient_name="Ana Petrović",
        patient_email="ana@example.com",
        doctor_name="Dr. Ilić",
        diagnosis="Headache",
        quantity=10,
        request_date=datetime(2024, 3, 10, 9, 0, tzinfo=timezone.utc),
        medication_id=1,
        medication=Medication(id=1, name="Paracetamol"),
    )
    
    data = request.to_dict()
    
    assert data["medication_id"] == 1
    assert "medication" not in data
    assert data["request_date"] == "2024-03-10T09:00:00+00:00"


def test_processing_result_is_immutable():
    """Test that processing results cannot be modified."""
    result = ProcessingResult(medication_name="Amoxicillin", message="ok")
    
    with pytest.raises(AttributeError):
        result.message = "changed"
