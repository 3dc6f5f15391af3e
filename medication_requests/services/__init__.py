"""Services for medication request processing."""

from .email_sender import (
    EmailSender,
    LoggingEmailSender,
    SentEmail,
    SmtpEmailSender,
    create_email_sender,
)
from .medication_request_service import MedicationRequestService

__all__ = [
    "EmailSender",
    "LoggingEmailSender",
    "SentEmail",
    "SmtpEmailSender",
    "create_email_sender",
    "MedicationRequestService",
]
