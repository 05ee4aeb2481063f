"""Unit tests for domain entities: requisites, documents, folder scaffolding."""

from datetime import UTC, datetime

import pytest

from dossier.domain.entities import DocumentEntity, RequisiteEntity, scaffold_folder
from dossier.domain.enums import State, StatusAttachment, ValidityUnit
from dossier.domain.exceptions import ResourceNotFoundException, ValidationException
from fakes import make_requisite


class TestRequisiteEntity:
    def test_validity_required_without_unit_raises(self) -> None:
        with pytest.raises(ValidationException) as exc_info:
            RequisiteEntity(id="r1", name="Contract", is_validity_required=True, validity_value=1)
        assert exc_info.value.details["field"] == "validity_value"

    def test_non_positive_validity_raises(self) -> None:
        with pytest.raises(ValidationException, match="greater than 0"):
            make_requisite("Contract", 0, ValidityUnit.DAY)

    def test_blank_name_raises(self) -> None:
        with pytest.raises(ValidationException, match="name is required"):
            RequisiteEntity(id="r1", name="  ")

    @pytest.mark.parametrize(
        ("value", "unit", "expected"),
        [
            (3, ValidityUnit.DAY, 3),
            (2, ValidityUnit.MONTH, 60),
            (1, ValidityUnit.YEAR, 365.25),
        ],
    )
    def test_validity_days(self, value: int, unit: ValidityUnit, expected: float) -> None:
        assert make_requisite("Card", value, unit).validity_days() == expected

    def test_validity_days_without_validity_raises(self) -> None:
        with pytest.raises(ValidationException, match="does not require validity"):
            make_requisite("Photo").validity_days()


class TestDocumentEntity:
    def _document(self, state: State = State.PENDING) -> DocumentEntity:
        return DocumentEntity(id="d1", user_id="u1", name="Contract", state=state)

    def test_add_attachment_becomes_current(self) -> None:
        document = self._document()
        first = document.add_attachment("a.pdf")
        second = document.add_attachment("b.pdf")
        assert document.current_attachment is second
        assert first.status == StatusAttachment.PENDING
        assert [a.filename for a in document.attachments] == ["a.pdf", "b.pdf"]

    def test_add_attachment_to_rejected_document_moves_to_pending(self) -> None:
        document = self._document(State.REJECTED)
        document.add_attachment("a.pdf")
        assert document.state == State.PENDING

    def test_add_attachment_keeps_approved_state(self) -> None:
        document = self._document(State.APPROVED)
        document.add_attachment("a.pdf")
        assert document.state == State.APPROVED

    def test_duplicate_filename_raises(self) -> None:
        document = self._document()
        document.add_attachment("a.pdf")
        with pytest.raises(ValidationException):
            document.add_attachment("a.pdf")

    def test_change_state_propagates_to_current_attachment(self) -> None:
        document = self._document()
        document.add_attachment("a.pdf")
        current = document.add_attachment("b.pdf")
        document.change_state(State.REJECTED, "Blurry scan")
        assert document.state == State.REJECTED
        assert document.rejection_message == "Blurry scan"
        assert current.status == StatusAttachment.REJECTED
        assert document.attachments[0].status == StatusAttachment.PENDING

    def test_approving_clears_previous_rejection_message(self) -> None:
        document = self._document()
        document.add_attachment("a.pdf")
        document.change_state(State.REJECTED, "Blurry scan")
        document.change_state(State.APPROVED)
        assert document.state == State.APPROVED
        assert document.rejection_message is None

    def test_replacing_rejected_attachment_resubmits_it(self) -> None:
        document = self._document()
        attachment = document.add_attachment("a.pdf")
        document.change_state(State.REJECTED, "Unsigned")

        document.mark_replaced(attachment)

        assert document.state == State.PENDING
        assert document.rejection_message is None
        assert attachment.status == StatusAttachment.PENDING
        assert document.current_attachment is attachment

    def test_replacing_approved_attachment_keeps_state(self) -> None:
        document = self._document()
        attachment = document.add_attachment("a.pdf")
        document.change_state(State.APPROVED)
        document.mark_replaced(attachment)
        assert document.state == State.APPROVED
        assert attachment.status == StatusAttachment.APPROVED

    def test_change_state_without_attachments_raises(self) -> None:
        with pytest.raises(ResourceNotFoundException):
            self._document().change_state(State.APPROVED)

    def test_rejection_message_too_long_raises(self) -> None:
        document = self._document()
        document.add_attachment("a.pdf")
        with pytest.raises(ValidationException) as exc_info:
            document.change_state(State.REJECTED, "x" * 501)
        assert exc_info.value.details["field"] == "rejection_message"
        assert document.state == State.PENDING

    def test_attachment_for_month(self) -> None:
        document = self._document()
        january = datetime(2024, 1, 15, tzinfo=UTC)
        document.add_attachment("jan.pdf", now=january)
        assert document.attachment_for_month(datetime(2024, 1, 31, tzinfo=UTC)).filename == "jan.pdf"
        assert document.attachment_for_month(datetime(2024, 2, 1, tzinfo=UTC)) is None

    def test_set_status_is_idempotent(self) -> None:
        attachment = self._document().add_attachment("a.pdf")
        assert attachment.set_status(StatusAttachment.APPROVED) is True
        assert attachment.set_status(StatusAttachment.APPROVED) is False


class TestScaffoldFolder:
    def test_one_pending_document_per_unique_requisite(self) -> None:
        contract = make_requisite("Contract", description="Signed contract", format="PDF")
        card = make_requisite("Vaccination card", 1, ValidityUnit.YEAR)
        folder = scaffold_folder([contract, card, contract], user_id="u1", name="CC-100")

        assert folder.state == State.PENDING
        assert [d.name for d in folder.documents] == ["Contract", "Vaccination card"]
        first = folder.documents[0]
        assert first.user_id == "u1"
        assert first.state == State.PENDING
        assert first.attachments == []
        assert first.expiration_date is None
        assert first.has_expiration is False
        assert first.description == "Signed contract"
        assert first.format == "PDF"

    def test_empty_requisites_give_empty_folder(self) -> None:
        assert scaffold_folder([], user_id="u1", name="CC-1").documents == []
