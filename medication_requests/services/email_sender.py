"""Email senders used to notify patients about medication requests."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from fastapi_mail import ConnectionConfig, FastMail, MessageSchema, MessageType

from medication_requests.config import Settings
from medication_requests.exceptions import EmailDeliveryError
from medication_requests.utils import logger


class EmailSender(ABC):
    """Sends a single plain-text email.
    
    Implementations return normally when the email was handed off and
    raise when it was not. No retries are attempted.
    """
    
    @abstractmethod
    async def send_email(self, recipient: str, subject: str, body: str) -> None:
        """Send email.
        
        Args:
            recipient: Recipient email address
            subject: Email subject
            body: Plain-text body
        """


class SmtpEmailSender(EmailSender):
    """Email sender delivering through an SMTP server with fastapi-mail."""
    
    def __init__(self, config: ConnectionConfig):
        """Initialize SMTP sender.
        
        Args:
            config: fastapi-mail connection configuration
        """
        self.config = config
        self._mail = FastMail(config)
    
    @classmethod
    def from_settings(cls, settings: Settings) -> "SmtpEmailSender":
        """Create SMTP sender from application settings."""
        config = ConnectionConfig(
            MAIL_USERNAME=settings.mail_username,
            MAIL_PASSWORD=settings.mail_password,
            MAIL_FROM=settings.mail_from,
            MAIL_PORT=settings.mail_port,
            MAIL_SERVER=settings.mail_server,
            MAIL_STARTTLS=settings.mail_starttls,
            MAIL_SSL_TLS=settings.mail_ssl_tls,
            USE_CREDENTIALS=True,
        )
        return cls(config)
    
    async def send_email(self, recipient: str, subject: str, body: str) -> None:
        """Send email through SMTP.
        
        Raises:
            EmailDeliveryError: If the SMTP server rejects or cannot be reached
        """
        message = MessageSchema(
            subject=subject,
            recipients=[recipient],
            body=body,
            subtype=MessageType.plain,
        )
        
        try:
            await self._mail.send_message(message)
        except Exception as e:
            logger.error(f"Failed to send email to {recipient}: {type(e).__name__}: {e}")
            raise EmailDeliveryError(f"Failed to send email to {recipient}: {e}") from e
        
        logger.info(f"Email '{subject}' sent to {recipient}")


@dataclass(frozen=True)
class SentEmail:
    """Email recorded by LoggingEmailSender."""
    
    recipient: str
    subject: str
    body: str


class LoggingEmailSender(EmailSender):
    """Email sender that only logs messages.
    
    Used when email delivery is disabled. Sent messages are kept in
    ``sent`` in the order they were sent.
    """
    
    def __init__(self):
        self.sent: list[SentEmail] = []
    
    async def send_email(self, recipient: str, subject: str, body: str) -> None:
        self.sent.append(SentEmail(recipient=recipient, subject=subject, body=body))
        logger.info(f"[EMAIL] To: {recipient} | Subject: {subject} | {body}")


def create_email_sender(settings: Settings) -> EmailSender:
    """Create the email sender selected by settings.
    
    Args:
        settings: Application settings
        
    Returns:
        SmtpEmailSender when email is enabled, LoggingEmailSender otherwise
    """
    if settings.email_enabled:
        logger.debug(f"Using SMTP email sender ({settings.mail_server}:{settings.mail_port})")
        return SmtpEmailSender.from_settings(settings)
    
    logger.warning("Email delivery is disabled, notifications will only be logged")
    return LoggingEmailSender()
