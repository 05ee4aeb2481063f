"""Email notifications for onboarding, expirations and document review."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from dossier.domain.enums import NotificationType
from dossier.infrastructure.external.email.protocols import (
    EmailRecipient,
    IEmailSender,
    OutgoingEmail,
)
from dossier.infrastructure.services.notification_templates import (
    NotificationTemplateRenderer,
)
from dossier.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class EmailNotificationService:
    """INotificationService implementation: renders a template and hands it to a sender.

    Delivery failures propagate as EmailDeliveryError (a ServiceUnavailableException).
    """

    def __init__(
        self,
        sender: IEmailSender,
        *,
        sender_email: str,
        sender_name: str | None = None,
        frontend_base_url: str = "",
        renderer: NotificationTemplateRenderer | None = None,
    ) -> None:
        self._sender = sender
        self._from = EmailRecipient(email=sender_email, name=sender_name)
        self._base_url = frontend_base_url.rstrip("/")
        self._renderer = renderer or NotificationTemplateRenderer()

    async def _send(
        self,
        template_key: str,
        to: EmailRecipient,
        params: dict[str, Any],
        **context: Any,
    ) -> None:
        subject, body = self._renderer.render(template_key, **context)
        await self._sender.send(
            OutgoingEmail(
                sender=self._from,
                recipients=[to],
                subject=subject,
                html_body=body,
                template_params=params,
            )
        )

    async def send_credentials(self, email: str, full_name: str, password: str) -> None:
        await self._send(
            "credentials",
            EmailRecipient(email, full_name),
            {"email": email},
            full_name=full_name,
            email=email,
            password=password,
            login_link=f"{self._base_url}/auth/login",
        )

    async def send_expiration_digest(
        self, email: str, full_name: str, messages: list[str]
    ) -> None:
        await self._send(
            "expiration_digest",
            EmailRecipient(email, full_name),
            {"documents": len(messages)},
            full_name=full_name,
            messages=messages,
        )

    async def send_expiration_update(
        self,
        email: str,
        document_name: str,
        expiration_date: datetime,
        message: str,
    ) -> None:
        await self._send(
            "expiration_update",
            EmailRecipient(email),
            {"document": document_name, "expirationDate": expiration_date.isoformat()},
            message=message,
        )

    async def send_review_notification(
        self,
        email: str,
        notification_type: NotificationType,
        user_id: str,
        details: str,
    ) -> None:
        if notification_type == NotificationType.COLLABORATOR:
            template_key = "review_collaborator"
            link = f"{self._base_url}/dashboard"
        else:
            template_key = "review_revisor"
            link = f"{self._base_url}/users/{user_id}/"
        await self._send(
            template_key,
            EmailRecipient(email),
            {"details": details},
            details=details,
            link=link,
        )
        logger.info("Review notification %s sent for user %s", notification_type.value, user_id)
