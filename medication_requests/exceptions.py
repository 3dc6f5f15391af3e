"""Exceptions for medication request processing."""


class MedicationRequestError(Exception):
    """Base exception for medication request processing errors."""
    pass


class MedicationRequestNotFoundError(MedicationRequestError):
    """Raised when no medication request exists for the given ID."""

    def __init__(self, request_id: int):
        self.request_id = request_id
        super().__init__(f"Medication request {request_id} not found")


class OutOfStockError(MedicationRequestError):
    """Raised when the requested medication has no stock left."""

    def __init__(self, medication_name: str):
        self.medication_name = medication_name
        super().__init__(f"Medication {medication_name} is out of stock")


class InsufficientStockError(MedicationRequestError):
    """Raised when stock is positive but lower than the requested quantity."""

    def __init__(self, medication_name: str, available: int, requested: int):
        self.medication_name = medication_name
        self.available = available
        self.requested = requested
        super().__init__(
            f"Insufficient stock for medication {medication_name}: "
            f"requested {requested}, available {available}"
        )


class DataStoreError(Exception):
    """Raised when the medication request data file cannot be used."""
    pass


class EmailDeliveryError(Exception):
    """Raised when an email could not be delivered."""
    pass


__all__ = [
    "MedicationRequestError",
    "MedicationRequestNotFoundError",
    "OutOfStockError",
    "InsufficientStockError",
    "DataStoreError",
    "EmailDeliveryError",
]
