"""Unit tests for DocumentLifecycleService."""

from datetime import UTC, date, datetime

import pytest

from dossier.application.use_cases.documents import DocumentLifecycleService, parse_state
from dossier.domain.entities import scaffold_folder
from dossier.domain.enums import Role, State, StatusAttachment, ValidityUnit
from dossier.domain.exceptions import (
    AuthorizationException,
    ResourceNotFoundException,
    ValidationException,
)
from fakes import (
    InMemoryFolderRepository,
    InMemoryRequisiteRepository,
    InMemoryUserRepository,
    RecordingNotifier,
    make_requisite,
    make_user,
)

VACCINES = make_requisite("Vaccination card", 2, ValidityUnit.MONTH)
CONTRACT = make_requisite("Contract")


@pytest.fixture
async def seeded(user_repo: InMemoryUserRepository, folder_repo: InMemoryFolderRepository):
    user = make_user(user_id="u1", number="321", email="owner@example.com")
    user_repo.items[user.id] = user
    folder = scaffold_folder([VACCINES, CONTRACT], user_id="u1", name="CC-321")
    folder.documents[0].add_attachment("card.pdf")
    folder_repo.add(folder)
    return user


def _service(user_repo, folder_repo, notifier, requisites=(VACCINES, CONTRACT)):
    return DocumentLifecycleService(
        user_repo,
        folder_repo,
        InMemoryRequisiteRepository(list(requisites)),
        notifier,
        alert_days=30,
    )


class TestSetExpeditionDate:
    async def test_sets_expiration_and_emails_owner(
        self, seeded, user_repo, folder_repo, notifier: RecordingNotifier
    ) -> None:
        result = await _service(user_repo, folder_repo, notifier).set_expedition_date(
            "321", "Vaccination card", "card.pdf", date(2024, 1, 10)
        )

        expected = datetime(2024, 3, 10, tzinfo=UTC)
        assert result.document.expiration_date == expected
        assert result.document.has_expiration is True
        assert result.attachment.expedition_date == date(2024, 1, 10)
        assert "expired" in result.expiration_message

        stored = folder_repo.stored_document("u1", "Vaccination card")
        assert stored.expiration_date == expected
        assert stored.find_attachment("card.pdf").expedition_date == date(2024, 1, 10)

        (email, name, when, message), = notifier.updates
        assert (email, name, when) == ("owner@example.com", "Vaccination card", expected)
        assert message == result.expiration_message

    async def test_email_failure_does_not_undo_the_update(
        self, seeded, user_repo, folder_repo
    ) -> None:
        notifier = RecordingNotifier(failing={"owner@example.com"})
        result = await _service(user_repo, folder_repo, notifier).set_expedition_date(
            "321", "Vaccination card", "card.pdf", date(2024, 1, 10)
        )
        assert result.document.expiration_date is not None
        assert folder_repo.stored_document("u1", "Vaccination card").has_expiration

    async def test_missing_date_rejected(self, seeded, user_repo, folder_repo, notifier) -> None:
        with pytest.raises(ValidationException) as exc_info:
            await _service(user_repo, folder_repo, notifier).set_expedition_date(
                "321", "Vaccination card", "card.pdf", None
            )
        assert exc_info.value.details["field"] == "expedition_date"

    async def test_requisite_without_validity_rejected(
        self, seeded, user_repo, folder_repo, notifier
    ) -> None:
        document = await folder_repo.get_document("u1", "Contract")
        document.add_attachment("contract.pdf")
        await folder_repo.save_document(document)

        with pytest.raises(ValidationException):
            await _service(user_repo, folder_repo, notifier).set_expedition_date(
                "321", "Contract", "contract.pdf", date(2024, 1, 10)
            )
        assert notifier.updates == []

    async def test_missing_requisite(self, seeded, user_repo, folder_repo, notifier) -> None:
        with pytest.raises(ResourceNotFoundException) as exc_info:
            await _service(
                user_repo, folder_repo, notifier, requisites=(CONTRACT,)
            ).set_expedition_date("321", "Vaccination card", "card.pdf", date(2024, 1, 10))
        assert exc_info.value.details["resource_type"] == "requisite"

    async def test_unknown_attachment(self, seeded, user_repo, folder_repo, notifier) -> None:
        with pytest.raises(ResourceNotFoundException) as exc_info:
            await _service(user_repo, folder_repo, notifier).set_expedition_date(
                "321", "Vaccination card", "other.pdf", date(2024, 1, 10)
            )
        assert exc_info.value.details["resource_type"] == "attachment"


class TestUpdateDocumentState:
    async def test_rejection_propagates_to_current_attachment(
        self, seeded, user_repo, folder_repo, notifier
    ) -> None:
        document = await _service(user_repo, folder_repo, notifier).update_document_state(
            "u1", "Vaccination card", "Rejected", "Photo is blurry"
        )
        assert document.state == State.REJECTED
        assert document.rejection_message == "Photo is blurry"
        stored = folder_repo.stored_document("u1", "Vaccination card")
        assert stored.current_attachment.status == StatusAttachment.REJECTED

    async def test_invalid_state(self, seeded, user_repo, folder_repo, notifier) -> None:
        with pytest.raises(ValidationException, match="Invalid state"):
            await _service(user_repo, folder_repo, notifier).update_document_state(
                "u1", "Vaccination card", "Archived"
            )

    async def test_document_without_attachments(
        self, seeded, user_repo, folder_repo, notifier
    ) -> None:
        with pytest.raises(ResourceNotFoundException):
            await _service(user_repo, folder_repo, notifier).update_document_state(
                "u1", "Contract", State.APPROVED
            )

    async def test_unknown_user(self, seeded, user_repo, folder_repo, notifier) -> None:
        with pytest.raises(ResourceNotFoundException):
            await _service(user_repo, folder_repo, notifier).update_document_state(
                "nobody", "Contract", State.APPROVED
            )


class TestListDocuments:
    async def test_owner_sees_documents(self, seeded, user_repo, folder_repo, notifier) -> None:
        documents = await _service(user_repo, folder_repo, notifier).list_documents(seeded, "u1")
        assert [d.name for d in documents] == ["Vaccination card", "Contract"]

    async def test_reviewer_sees_any_folder(self, seeded, user_repo, folder_repo, notifier) -> None:
        reviewer = make_user(roles=[Role.COORDINATOR])
        documents = await _service(user_repo, folder_repo, notifier).list_documents(reviewer, "u1")
        assert len(documents) == 2

    async def test_other_collaborator_denied(
        self, seeded, user_repo, folder_repo, notifier
    ) -> None:
        with pytest.raises(AuthorizationException):
            await _service(user_repo, folder_repo, notifier).list_documents(make_user(), "u1")


def test_parse_state_accepts_enum_and_value() -> None:
    assert parse_state(State.APPROVED) is State.APPROVED
    assert parse_state("Pending") is State.PENDING
