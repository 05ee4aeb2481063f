"""Log-only email sender: logs instead of delivering (development, tests)."""

from __future__ import annotations

import logging

from dossier.infrastructure.external.email.protocols import OutgoingEmail
from dossier.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class LogOnlyEmailSender:
    """IEmailSender implementation that logs instead of sending email.

    Use when no provider is configured (EMAIL_BACKEND=log).
    """

    async def send(self, message: OutgoingEmail) -> None:
        recipients = [r.email for r in message.recipients]
        subject_preview = (message.subject or "")[:80]
        if not recipients:
            logger.info("Email: no recipients, skipping send (subject=%r)", subject_preview)
            return
        logger.info(
            "Email: would send to %d recipient(s) (subject=%r)",
            len(recipients),
            subject_preview,
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Email recipients: %s", recipients)
            logger.debug("Email body (first 500 chars): %s", message.html_body[:500])
