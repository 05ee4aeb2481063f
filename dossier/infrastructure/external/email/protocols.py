"""Email sender protocol and message structure (provider-agnostic)."""

from dataclasses import dataclass, field
from typing import Any, Protocol


@dataclass(frozen=True)
class EmailRecipient:
    email: str
    name: str | None = None


@dataclass(frozen=True)
class OutgoingEmail:
    """Transactional email ready to hand to a provider."""

    sender: EmailRecipient
    recipients: list[EmailRecipient]
    subject: str
    html_body: str
    template_params: dict[str, Any] = field(default_factory=dict)


class IEmailSender(Protocol):
    """Transactional email delivery (DIP)."""

    async def send(self, message: OutgoingEmail) -> None:
        """Deliver message. Raises EmailDeliveryError on failure."""
        ...
