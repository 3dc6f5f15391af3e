"""Error formatting and structured logging helpers."""

from typing import Optional

from loguru import logger

from medication_requests.exceptions import (
    DataStoreError,
    EmailDeliveryError,
    InsufficientStockError,
    MedicationRequestNotFoundError,
    OutOfStockError,
)


def format_error_for_user(error: Exception) -> str:
    """Convert errors to short human-readable messages.
    
    Args:
        error: Exception to format
        
    Returns:
        User-facing error message
    """
    if isinstance(error, MedicationRequestNotFoundError):
        return f"Medication request {error.request_id} does not exist."
    
    if isinstance(error, OutOfStockError):
        return f"Medication {error.medication_name} is out of stock."
    
    if isinstance(error, InsufficientStockError):
        return (
            f"Not enough {error.medication_name} in stock: "
            f"{error.requested} requested, {error.available} available."
        )
    
    if isinstance(error, EmailDeliveryError):
        return (
            "The request was processed but the notification email "
            "could not be sent."
        )
    
    if isinstance(error, DataStoreError):
        return f"Medication data could not be loaded or saved: {error}"
    
    if isinstance(error, ValueError):
        return f"Configuration error: {error}"
    
    return "An internal error occurred."


def log_operation(
    operation_name: str,
    request_id: Optional[int] = None,
    medication_id: Optional[int] = None,
    **extra_context,
) -> None:
    """Log an operation with structured context.
    
    Context is bound to the log record's ``extra`` dict.
    
    Args:
        operation_name: Name of the operation being performed
        request_id: Medication request ID (if applicable)
        medication_id: Medication ID (if applicable)
        **extra_context: Additional context to include in log
    """
    context = {
        "operation": operation_name,
    }
    
    if request_id is not None:
        context["request_id"] = request_id
    
    if medication_id is not None:
        context["medication_id"] = medication_id
    
    context.update(extra_context)
    
    logger.bind(**context).info(f"Operation: {operation_name}")


__all__ = [
    "format_error_for_user",
    "log_operation",
]
