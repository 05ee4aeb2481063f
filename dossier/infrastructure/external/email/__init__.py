"""Email delivery: Brevo transactional API and log-only backends."""

from dossier.infrastructure.external.email.factory import EmailSenderFactory
from dossier.infrastructure.external.email.protocols import (
    EmailRecipient,
    IEmailSender,
    OutgoingEmail,
)

__all__ = [
    "EmailRecipient",
    "EmailSenderFactory",
    "IEmailSender",
    "OutgoingEmail",
]
