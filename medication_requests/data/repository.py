"""Repository interface for medication requests."""

from abc import ABC, abstractmethod
from typing import Optional

from .models import MedicationRequest


class MedicationRequestRepository(ABC):
    """Read access to medication requests with their medication attached.
    
    Implementations return live objects: the medication referenced by a
    returned request is the same instance shared with every other request
    for that medication, so in-place stock changes are visible to callers.
    """
    
    @abstractmethod
    async def get_one(self, request_id: int) -> Optional[MedicationRequest]:
        """Get medication request by ID.
        
        Args:
            request_id: Medication request ID
            
        Returns:
            MedicationRequest instance or None if not found
        """
