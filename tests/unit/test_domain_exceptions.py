"""Unit tests for domain and infrastructure exception payloads."""

from dossier.domain.exceptions import (
    AuthorizationException,
    DossierException,
    ResourceAlreadyExistsException,
    ResourceNotFoundException,
    ServiceUnavailableException,
    ValidationException,
)
from dossier.infrastructure.exceptions import (
    EmailDeliveryError,
    StorageNotFoundError,
    StorageUnavailableError,
)


def test_base_exception_defaults_error_code_to_class_name() -> None:
    exc = DossierException("something broke")
    assert exc.to_dict() == {
        "error": "DossierException",
        "message": "something broke",
        "details": {},
    }


def test_validation_exception_carries_field() -> None:
    exc = ValidationException("bad page", field="page")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "page"}
    assert ValidationException("bad").details == {}


def test_authorization_exception_message_from_resource_and_action() -> None:
    exc = AuthorizationException(resource="notification", action="send Revisor")
    assert exc.message == "Permission denied: send Revisor on notification"
    assert exc.details == {"resource": "notification", "action": "send Revisor"}
    assert AuthorizationException(message="nope").message == "nope"


def test_not_found_and_conflict_codes() -> None:
    assert ResourceNotFoundException("user", "u1").to_dict() == {
        "error": "RESOURCE_NOT_FOUND",
        "message": "user not found: u1",
        "details": {"resource_type": "user", "resource_id": "u1"},
    }
    assert ResourceAlreadyExistsException("group", "Clinical").error_code == (
        "RESOURCE_ALREADY_EXISTS"
    )


def test_infrastructure_failures_are_service_unavailable() -> None:
    storage = StorageUnavailableError("upload", "a.pdf", "HTTP 502")
    email = EmailDeliveryError("a@example.com", "timeout")

    for exc in (storage, email):
        assert isinstance(exc, ServiceUnavailableException)
        assert exc.error_code == "SERVICE_UNAVAILABLE"
    assert storage.details == {
        "service": "storage",
        "operation": "upload",
        "reason": "HTTP 502",
        "filename": "a.pdf",
    }
    assert email.details["recipient"] == "a@example.com"
    assert StorageNotFoundError("a.pdf").error_code == "STORAGE_NOT_FOUND"
