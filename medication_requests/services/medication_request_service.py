"""Medication request processing service."""

from medication_requests.data.models import ProcessingResult
from medication_requests.data.repository import MedicationRequestRepository
from medication_requests.exceptions import (
    DataStoreError,
    InsufficientStockError,
    MedicationRequestNotFoundError,
    OutOfStockError,
)
from medication_requests.utils import log_operation, logger

from .email_sender import EmailSender

NOTIFICATION_SUBJECT = "New Medication Request"
NOTIFICATION_BODY = "Patient {patient_name} requested {quantity} of medication {medication_name}."
SUCCESS_MESSAGE = "Medication request is successfully processed."


class MedicationRequestService:
    """Processes medication requests against medication stock.
    
    Steps run strictly in order: fetch the request, validate stock,
    decrement stock, notify the patient. Any failure before the decrement
    leaves stock untouched and sends nothing. A notification failure
    propagates after the decrement has already happened.
    """
    
    def __init__(
        self,
        repository: MedicationRequestRepository,
        email_sender: EmailSender,
    ):
        """Initialize service.
        
        Args:
            repository: Source of medication requests
            email_sender: Sender used for patient notifications
        """
        self.repository = repository
        self.email_sender = email_sender
    
    async def process_medication_request(self, request_id: int) -> ProcessingResult:
        """Process a medication request.
        
        Args:
            request_id: Medication request ID
            
        Returns:
            ProcessingResult with the medication name and a success message
            
        Raises:
            MedicationRequestNotFoundError: If no request exists for the ID
            OutOfStockError: If the medication stock is zero
            InsufficientStockError: If stock is lower than the requested quantity
            DataStoreError: If the repository returned a request without its medication
        """
        request = await self.repository.get_one(request_id)
        if request is None:
            logger.warning(f"Medication request {request_id} not found")
            raise MedicationRequestNotFoundError(request_id)
        
        medication = request.medication
        if medication is None:
            logger.error(f"Medication request {request_id} has no medication attached")
            raise DataStoreError(
                f"Medication request {request_id} has no medication attached "
                f"(medication_id={request.medication_id})"
            )
        
        if medication.quantity == 0:
            logger.warning(
                f"Medication request {request_id} rejected: "
                f"{medication.name} is out of stock"
            )
            raise OutOfStockError(medication.name)
        
        if medication.quantity < request.quantity:
            logger.warning(
                f"Medication request {request_id} rejected: "
                f"{request.quantity} of {medication.name} requested, "
                f"{medication.quantity} available"
            )
            raise InsufficientStockError(
                medication.name,
                available=medication.quantity,
                requested=request.quantity,
            )
        
        medication.quantity -= request.quantity
        log_operation(
            "stock_decremented",
            request_id=request_id,
            medication_id=medication.id,
            quantity=request.quantity,
            remaining=medication.quantity,
        )
        
        await self.email_sender.send_email(
            request.patient_email,
            NOTIFICATION_SUBJECT,
            NOTIFICATION_BODY.format(
                patient_name=request.patient_name,
                quantity=request.quantity,
                medication_name=medication.name,
            ),
        )
        
        logger.info(f"Medication request {request_id} processed ({medication.name})")
        
        return ProcessingResult(
            medication_name=medication.name,
            message=SUCCESS_MESSAGE,
        )
