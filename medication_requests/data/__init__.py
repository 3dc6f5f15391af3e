"""Data layer for medication requests.

This module provides data models, the repository interface and the
JSON file repository.
"""

from .models import Medication, MedicationRequest, ProcessingResult
from .repository import MedicationRequestRepository
from .storage import JsonMedicationRequestRepository

__all__ = [
    "Medication",
    "MedicationRequest",
    "ProcessingResult",
    "MedicationRequestRepository",
    "JsonMedicationRequestRepository",
]
