"""Brevo transactional email sender (HTTP API v3, via httpx)."""

from __future__ import annotations

from typing import Any

import httpx

from dossier.infrastructure.exceptions import EmailDeliveryError
from dossier.infrastructure.external.email.protocols import (
    EmailRecipient,
    OutgoingEmail,
)
from dossier.shared.telemetry.logging import get_logger
from dossier.shared.utils.retry import retry_async

logger = get_logger(__name__)


class _RetryableStatus(Exception):
    def __init__(self, status_code: int) -> None:
        super().__init__(f"HTTP {status_code}")
        self.status_code = status_code


_RETRYABLE = (httpx.TransportError, _RetryableStatus)


def _contact(recipient: EmailRecipient) -> dict[str, str]:
    contact = {"email": recipient.email}
    if recipient.name:
        contact["name"] = recipient.name
    return contact


def build_payload(message: OutgoingEmail) -> dict[str, Any]:
    """Return the JSON body for POST /v3/smtp/email."""
    payload: dict[str, Any] = {
        "sender": _contact(message.sender),
        "to": [_contact(r) for r in message.recipients],
        "subject": message.subject,
        "htmlContent": message.html_body,
    }
    if message.template_params:
        payload["params"] = message.template_params
    return payload


class BrevoEmailSender:
    """IEmailSender over Brevo's REST API.

    429, 5xx and transport errors are retried with exponential backoff;
    other 4xx responses fail immediately.
    """

    def __init__(
        self,
        api_key: str,
        api_url: str = "https://api.brevo.com/v3/smtp/email",
        *,
        timeout_seconds: float = 15.0,
        max_retries: int = 3,
        backoff_seconds: float = 1.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._api_key = api_key
        self.api_url = api_url
        self.timeout = httpx.Timeout(timeout_seconds)
        self.max_attempts = max(1, max_retries)
        self.backoff_seconds = backoff_seconds
        self._http = http_client

    async def _post(self, payload: dict[str, Any]) -> httpx.Response:
        headers = {
            "api-key": self._api_key,
            "accept": "application/json",
            "content-type": "application/json",
        }
        if self._http is not None:
            response = await self._http.post(
                self.api_url, json=payload, headers=headers, timeout=self.timeout
            )
        else:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(self.api_url, json=payload, headers=headers)
        if response.status_code == 429 or response.status_code >= 500:
            raise _RetryableStatus(response.status_code)
        return response

    async def send(self, message: OutgoingEmail) -> None:
        recipient = ", ".join(r.email for r in message.recipients)
        payload = build_payload(message)
        try:
            response = await retry_async(
                lambda: self._post(payload),
                max_attempts=self.max_attempts,
                backoff_seconds=self.backoff_seconds,
                retry_on=_RETRYABLE,
                description=f"Brevo send to {recipient}",
            )
        except _RETRYABLE as e:
            raise EmailDeliveryError(recipient, str(e)) from e
        if response.status_code >= 400:
            raise EmailDeliveryError(
                recipient, f"HTTP {response.status_code}: {response.text[:200]}"
            )
        logger.info("Email %r sent to %s", message.subject, recipient)
