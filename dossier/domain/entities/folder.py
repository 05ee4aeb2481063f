"""Folder aggregate: a user's folder, its documents and their attachments.

A folder is scaffolded once, at user creation, with one document per
applicable requisite. Documents are identified by (user_id, name), where
name is the originating requisite's name. Attachments are append-only;
each document keeps an explicit pointer to its current attachment.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime

from dossier.core.constants import REJECTION_MESSAGE_MAX_LENGTH
from dossier.domain.entities.requisite import RequisiteEntity
from dossier.domain.enums import State, StatusAttachment
from dossier.domain.exceptions import ResourceNotFoundException, ValidationException
from dossier.shared.utils.datetime import is_same_month, utc_now
from dossier.shared.utils.generators import generate_cuid


@dataclass
class AttachmentEntity:
    """One uploaded file for a document. Bytes live in the blob store under filename."""

    id: str
    filename: str
    status: StatusAttachment = StatusAttachment.PENDING
    is_active: bool = True
    expedition_date: date | None = None
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def set_status(self, status: StatusAttachment, now: datetime | None = None) -> bool:
        """Set review status. Returns False (and changes nothing) when already set."""
        if self.status == status:
            return False
        self.status = status
        self.updated_at = now or utc_now()
        return True

    def was_created_in_month_of(self, reference: datetime) -> bool:
        """Return whether this attachment was created in reference's calendar month."""
        return is_same_month(self.created_at, reference)


@dataclass
class DocumentEntity:
    """A required document in a user's folder."""

    id: str
    user_id: str
    name: str
    state: State = State.PENDING
    format: str | None = None
    description: str | None = None
    is_active: bool = True
    has_expiration: bool = False
    expiration_date: datetime | None = None
    rejection_message: str | None = None
    attachments: list[AttachmentEntity] = field(default_factory=list)
    current_attachment_id: str | None = None
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    @property
    def current_attachment(self) -> AttachmentEntity | None:
        """The most recently uploaded or replaced attachment, if any."""
        if self.current_attachment_id is None:
            return None
        for attachment in self.attachments:
            if attachment.id == self.current_attachment_id:
                return attachment
        return None

    def find_attachment(self, filename: str) -> AttachmentEntity | None:
        """Return the attachment stored under filename, or None."""
        for attachment in self.attachments:
            if attachment.filename == filename:
                return attachment
        return None

    def attachment_for_month(self, reference: datetime) -> AttachmentEntity | None:
        """Return the first attachment created in reference's calendar month."""
        for attachment in self.attachments:
            if attachment.was_created_in_month_of(reference):
                return attachment
        return None

    def add_attachment(
        self,
        filename: str,
        expedition_date: date | None = None,
        now: datetime | None = None,
    ) -> AttachmentEntity:
        """Append a new pending attachment and make it current.

        A rejected document goes back to pending on resubmission.
        """
        if self.find_attachment(filename) is not None:
            raise ValidationException(
                f"Attachment '{filename}' already exists in document '{self.name}'",
                field="filename",
            )
        timestamp = now or utc_now()
        attachment = AttachmentEntity(
            id=generate_cuid(),
            filename=filename,
            status=StatusAttachment.PENDING,
            is_active=True,
            expedition_date=expedition_date,
            created_at=timestamp,
            updated_at=timestamp,
        )
        self.attachments.append(attachment)
        self.current_attachment_id = attachment.id
        if self.state == State.REJECTED:
            self.state = State.PENDING
            self.rejection_message = None
        self.updated_at = timestamp
        return attachment

    def mark_replaced(self, attachment: AttachmentEntity, now: datetime | None = None) -> None:
        """Record that attachment's bytes were overwritten; it becomes current.

        Replacing counts as a resubmission: a rejected document and the
        replaced attachment go back to pending review.
        """
        if attachment not in self.attachments:
            raise ResourceNotFoundException("attachment", attachment.filename)
        timestamp = now or utc_now()
        attachment.updated_at = timestamp
        self.current_attachment_id = attachment.id
        if self.state == State.REJECTED:
            self.state = State.PENDING
            self.rejection_message = None
            attachment.set_status(StatusAttachment.PENDING, now=timestamp)
        self.updated_at = timestamp

    def apply_expiration(self, expiration_date: datetime, now: datetime | None = None) -> None:
        """Set the computed expiration date."""
        self.expiration_date = expiration_date
        self.has_expiration = True
        self.updated_at = now or utc_now()

    def change_state(
        self,
        state: State,
        rejection_message: str | None = None,
        now: datetime | None = None,
    ) -> AttachmentEntity:
        """Set the review state and propagate it onto the current attachment.

        Returns:
            The attachment whose status was updated.

        Raises:
            ValidationException: Rejection message too long.
            ResourceNotFoundException: Document has no attachment to update.
        """
        if rejection_message and len(rejection_message) > REJECTION_MESSAGE_MAX_LENGTH:
            raise ValidationException(
                f"rejection_message must be at most {REJECTION_MESSAGE_MAX_LENGTH} characters",
                field="rejection_message",
            )
        current = self.current_attachment
        if current is None:
            raise ResourceNotFoundException("attachment", f"{self.name} (no attachments)")
        timestamp = now or utc_now()
        self.state = state
        if state == State.REJECTED:
            if rejection_message:
                self.rejection_message = rejection_message
        else:
            self.rejection_message = None
        current.set_status(StatusAttachment.from_state(state), now=timestamp)
        self.updated_at = timestamp
        return current


@dataclass
class FolderEntity:
    """A user's folder. Owns exactly one document per scaffolded requisite."""

    id: str
    user_id: str
    name: str
    state: State = State.PENDING
    is_active: bool = True
    documents: list[DocumentEntity] = field(default_factory=list)

    def find_document(self, name: str) -> DocumentEntity | None:
        """Return the document named name, or None."""
        for document in self.documents:
            if document.name == name:
                return document
        return None

    def dated_documents(self) -> list[DocumentEntity]:
        """Documents that have an expiration date."""
        return [d for d in self.documents if d.expiration_date is not None]


def _unique_requisites(requisites: list[RequisiteEntity]) -> list[RequisiteEntity]:
    """Deduplicate by id (then name), keeping first occurrence order."""
    seen: set[str] = set()
    unique: list[RequisiteEntity] = []
    for requisite in requisites:
        key = requisite.id or requisite.name
        if key in seen:
            continue
        seen.add(key)
        unique.append(requisite)
    return unique


def scaffold_folder(
    requisites: list[RequisiteEntity],
    user_id: str,
    name: str,
    now: datetime | None = None,
) -> FolderEntity:
    """Build a new pending folder with one pending document per unique requisite.

    Documents start with no attachments and no expiration; format and
    description are copied from the requisite.
    """
    timestamp = now or utc_now()
    documents = [
        DocumentEntity(
            id=generate_cuid(),
            user_id=user_id,
            name=requisite.name,
            state=State.PENDING,
            format=requisite.format,
            description=requisite.description,
            is_active=True,
            has_expiration=False,
            expiration_date=None,
            attachments=[],
            created_at=timestamp,
            updated_at=timestamp,
        )
        for requisite in _unique_requisites(requisites)
    ]
    return FolderEntity(
        id=generate_cuid(),
        user_id=user_id,
        name=name,
        state=State.PENDING,
        is_active=True,
        documents=documents,
    )
