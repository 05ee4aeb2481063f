"""Unit tests for notification rendering and the Brevo sender."""

import json
from datetime import UTC, datetime

import httpx
import pytest

from dossier.domain.enums import NotificationType
from dossier.infrastructure.exceptions import EmailDeliveryError
from dossier.infrastructure.external.email import EmailRecipient, OutgoingEmail
from dossier.infrastructure.external.email.brevo_sender import (
    BrevoEmailSender,
    build_payload,
)
from dossier.infrastructure.services import (
    EmailNotificationService,
    NotificationTemplateRenderer,
)

BREVO_URL = "https://brevo.test/v3/smtp/email"


class CapturingSender:
    def __init__(self) -> None:
        self.sent: list[OutgoingEmail] = []

    async def send(self, message: OutgoingEmail) -> None:
        self.sent.append(message)


@pytest.fixture
def sender() -> CapturingSender:
    return CapturingSender()


@pytest.fixture
def service(sender: CapturingSender) -> EmailNotificationService:
    return EmailNotificationService(
        sender,
        sender_email="hr@example.com",
        sender_name="HR",
        frontend_base_url="https://app.example.com/",
    )


def _message(**overrides) -> OutgoingEmail:
    values = {
        "sender": EmailRecipient("hr@example.com", "HR"),
        "recipients": [EmailRecipient("ana@example.com")],
        "subject": "Hello",
        "html_body": "<p>Hi</p>",
    }
    values.update(overrides)
    return OutgoingEmail(**values)


class TestTemplates:
    def test_unknown_template(self) -> None:
        with pytest.raises(KeyError):
            NotificationTemplateRenderer().render("missing")

    def test_values_are_escaped(self) -> None:
        _, body = NotificationTemplateRenderer().render(
            "expiration_update", message="<script>alert(1)</script>"
        )
        assert "<script>" not in body
        assert "&lt;script&gt;" in body


class TestEmailNotificationService:
    async def test_credentials_email(self, service, sender: CapturingSender) -> None:
        await service.send_credentials("ana@example.com", "Ana Gomez", "s3cret!")

        (message,) = sender.sent
        assert message.sender == EmailRecipient("hr@example.com", "HR")
        assert message.recipients == [EmailRecipient("ana@example.com", "Ana Gomez")]
        assert message.subject == "Your access credentials"
        assert "s3cret!" in message.html_body
        assert 'href="https://app.example.com/auth/login"' in message.html_body

    async def test_digest_joins_messages_with_line_breaks(
        self, service, sender: CapturingSender
    ) -> None:
        await service.send_expiration_digest(
            "ana@example.com", "Ana Gomez", ["First line.", "Second line."]
        )
        body = sender.sent[0].html_body
        assert "First line.<br>Second line." in body
        assert body.count("<br>") == 1
        assert sender.sent[0].template_params == {"documents": 2}

    async def test_expiration_update(self, service, sender: CapturingSender) -> None:
        await service.send_expiration_update(
            "ana@example.com",
            "Vaccination card",
            datetime(2024, 3, 10, tzinfo=UTC),
            "Document 'Vaccination card' will expire in 40 days.",
        )
        message = sender.sent[0]
        assert message.subject == "Updates about your documents"
        assert message.template_params["expirationDate"] == "2024-03-10T00:00:00+00:00"

    @pytest.mark.parametrize(
        ("notification_type", "link"),
        [
            (NotificationType.COLLABORATOR, "https://app.example.com/dashboard"),
            (NotificationType.REVISOR, "https://app.example.com/users/u1/"),
        ],
    )
    async def test_review_links(
        self, service, sender: CapturingSender, notification_type, link
    ) -> None:
        await service.send_review_notification(
            "rev@example.com", notification_type, "u1", "CC 123"
        )
        assert f'href="{link}"' in sender.sent[0].html_body


def test_build_payload() -> None:
    payload = build_payload(_message(template_params={"documents": 1}))
    assert payload == {
        "sender": {"email": "hr@example.com", "name": "HR"},
        "to": [{"email": "ana@example.com"}],
        "subject": "Hello",
        "htmlContent": "<p>Hi</p>",
        "params": {"documents": 1},
    }
    assert "params" not in build_payload(_message())


class TestBrevoEmailSender:
    def _sender(self, handler, max_retries: int = 3) -> BrevoEmailSender:
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return BrevoEmailSender(
            "key-123",
            BREVO_URL,
            max_retries=max_retries,
            backoff_seconds=0,
            http_client=client,
        )

    async def test_posts_payload_with_api_key(self) -> None:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(201, json={"messageId": "m1"})

        await self._sender(handler).send(_message())

        (request,) = requests
        assert request.method == "POST"
        assert str(request.url) == BREVO_URL
        assert request.headers["api-key"] == "key-123"
        assert json.loads(request.content)["subject"] == "Hello"

    async def test_retries_server_errors(self) -> None:
        statuses = iter([500, 503, 201])

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(next(statuses))

        await self._sender(handler).send(_message())

    async def test_persistent_failure_raises_delivery_error(self) -> None:
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(502)

        with pytest.raises(EmailDeliveryError) as exc_info:
            await self._sender(handler, max_retries=2).send(_message())
        assert len(calls) == 2
        assert exc_info.value.details["recipient"] == "ana@example.com"

    async def test_client_error_is_not_retried(self) -> None:
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(400, json={"message": "invalid sender"})

        with pytest.raises(EmailDeliveryError, match="ana@example.com"):
            await self._sender(handler).send(_message())
        assert len(calls) == 1
