"""Data models for medication requests."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional


@dataclass
class Medication:
    """Medication stock record.
    
    A medication is shared by every request that references it, so
    quantity changes made while processing one request are visible
    through all of them.
    
    Attributes:
        id: Unique identifier of the medication
        name: Medication name (e.g., "Amoxicillin")
        description: Short description (e.g., "Antibiotic")
        quantity: Units in stock, never negative
    """
    
    id: int
    name: str
    description: str = ""
    quantity: int = 0
    
    def to_dict(self) -> dict:
        """Convert medication to dictionary for JSON serialization.
        
        Returns:
            Dictionary representation of the medication
        """
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "quantity": self.quantity,
        }
    
    @classmethod
    def from_dict(cls, data: dict) -> "Medication":
        """Create medication from dictionary.
        
        Args:
            data: Dictionary with medication data
            
        Returns:
            Medication instance
        """
        return cls(
            id=data["id"],
            name=data["name"],
            description=data.get("description", ""),
            quantity=data.get("quantity", 0),
        )


@dataclass
class MedicationRequest:
    """Medication request submitted for a patient.
    
    Attributes:
        id: Unique identifier of the request
        patient_name: Full name of the patient
        patient_email: Email address notified when the request is processed
        doctor_name: Prescribing doctor
        diagnosis: Diagnosis the medication is requested for
        quantity: Requested units, positive
        request_date: When the request was submitted (UTC)
        medication_id: ID of the referenced medication
        medication: Referenced medication (not owned by the request)
    """
    
    id: int
    patient_name: str
    patient_email: str
    doctor_name: str
    diagnosis: str
    quantity: int
    request_date: datetime
    medication_id: int
    medication: Optional[Medication] = None
    
    def to_dict(self) -> dict:
        """Convert request to dictionary for JSON serialization.
        
        The medication is stored by ID only.
        
        Returns:
            Dictionary representation of the request
        """
        return {
            "id": self.id,
            "patient_name": self.patient_name,
            "patient_email": self.patient_email,
            "doctor_name": self.doctor_name,
            "diagnosis": self.diagnosis,
            "quantity": self.quantity,
            "request_date": self.request_date.isoformat(),
            "medication_id": self.medication_id,
        }
    
    @classmethod
    def from_dict(
        cls,
        data: dict,
        medication: Optional[Medication] = None,
    ) -> "MedicationRequest":
        """Create request from dictionary.
        
        Args:
            data: Dictionary with request data
            medication: Medication instance to attach (shared, not copied)
            
        Returns:
            MedicationRequest instance
        """
        request_date = data.get("request_date")
        return cls(
            id=data["id"],
            patient_name=data["patient_name"],
            patient_email=data["patient_email"],
            doctor_name=data.get("doctor_name", ""),
            diagnosis=data.get("diagnosis", ""),
            quantity=data["quantity"],
            request_date=(
                datetime.fromisoformat(request_date)
                if request_date
                else datetime.now(timezone.utc)
            ),
            medication_id=data["medication_id"],
            medication=medication,
        )


@dataclass(frozen=True)
class ProcessingResult:
    """Outcome of a successfully processed medication request."""
    
    medication_name: str
    message: str
