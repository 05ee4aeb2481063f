"""Email sender factory: creates the Brevo or log-only sender from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from dossier.infrastructure.external.email.brevo_sender import BrevoEmailSender
from dossier.infrastructure.external.email.log_sender import LogOnlyEmailSender
from dossier.infrastructure.external.email.protocols import IEmailSender
from dossier.shared.telemetry.logging import get_logger

if TYPE_CHECKING:
    import httpx

    from dossier.core.config import Settings

logger = get_logger(__name__)


class EmailSenderFactory:
    """Factory for email sender instances by EMAIL_BACKEND."""

    @staticmethod
    def create_sender(
        settings: Settings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> IEmailSender:
        """Create sender from settings.

        Raises:
            ValueError: Unknown backend or missing API key.
        """
        from dossier.core.config import get_settings

        s = settings or get_settings()
        backend = s.email_backend.lower()
        if backend == "log":
            return LogOnlyEmailSender()
        if backend == "brevo":
            if s.brevo_api_key is None or not s.brevo_api_key.get_secret_value():
                raise ValueError("BREVO_API_KEY required for brevo backend")
            logger.debug("Creating BrevoEmailSender")
            return BrevoEmailSender(
                s.brevo_api_key.get_secret_value(),
                s.brevo_api_url,
                timeout_seconds=s.email_timeout_seconds,
                max_retries=s.email_max_retries,
                backoff_seconds=s.email_retry_backoff_seconds,
                http_client=http_client,
            )
        raise ValueError(f"Unknown email backend: {backend}. Supported: 'brevo', 'log'")
