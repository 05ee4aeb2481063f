"""Attachment operations: upload and replace (write), review, and query (read)."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from dossier.application.dtos.common import PageRequest
from dossier.application.dtos.document import DownloadedAttachment, StoredFileList
from dossier.core.constants import PDF_MAGIC, PDF_MIME_TYPE
from dossier.domain.access_policy import can_read_folder, can_send_notification
from dossier.domain.exceptions import (
    AuthorizationException,
    DossierException,
    ResourceNotFoundException,
    ValidationException,
)
from dossier.shared.utils.datetime import utc_now
from dossier.shared.utils.generators import generate_attachment_filename

if TYPE_CHECKING:
    from datetime import date

    from dossier.application.interfaces.repositories import (
        IFolderRepository,
        IUserRepository,
    )
    from dossier.application.interfaces.services import (
        IBlobStorage,
        INotificationService,
    )
    from dossier.domain.entities import AttachmentEntity, DocumentEntity, UserEntity
    from dossier.domain.enums import NotificationType, StatusAttachment

logger = logging.getLogger(__name__)


def ensure_pdf(content: bytes, content_type: str | None) -> None:
    """Reject anything that is not a PDF by declared MIME type and by file header.

    A missing content type counts as not a PDF.
    """
    declared = (content_type or "").split(";")[0].strip().lower()
    if declared != PDF_MIME_TYPE:
        raise ValidationException(
            f"Only PDF files are accepted (got '{content_type or 'no content type'}')",
            field="file",
        )
    if not content.startswith(PDF_MAGIC):
        raise ValidationException("Uploaded file is not a PDF", field="file")


def _attachment_filename(original_filename: str | None) -> str:
    _, ext = os.path.splitext(original_filename or "")
    return generate_attachment_filename(original_filename if ext else "upload.pdf")


def ensure_can_read_folder(reader: UserEntity, owner_id: str) -> None:
    if not can_read_folder(reader.id, reader.roles, owner_id):
        raise AuthorizationException(
            message="You do not have permission to access these documents"
        )


class AttachmentUploadService:
    """Uploads new attachments and replaces the current month's attachment.

    Bytes go to the blob store before the attachment row is written. When
    the write fails the uploaded blob is deleted again.
    """

    def __init__(
        self,
        storage: IBlobStorage,
        folder_repo: IFolderRepository,
    ) -> None:
        self.storage = storage
        self.folder_repo = folder_repo

    async def _get_document(self, user_id: str, document_name: str) -> DocumentEntity:
        document = await self.folder_repo.get_document(user_id, document_name)
        if document is None:
            raise ResourceNotFoundException("document", document_name)
        return document

    async def _discard_blob(self, filename: str) -> None:
        try:
            await self.storage.delete(filename)
        except DossierException as exc:
            logger.warning("Could not delete orphaned blob %s: %s", filename, exc)

    async def create_attachment(
        self,
        user_id: str,
        document_name: str,
        content: bytes,
        original_filename: str | None,
        content_type: str | None = PDF_MIME_TYPE,
        expedition_date: date | None = None,
    ) -> AttachmentEntity:
        """Upload a PDF and append it to the user's document as a pending attachment.

        Raises:
            ValidationException: Not a PDF.
            ResourceNotFoundException: Document not in the user's folder.
            ServiceUnavailableException: Blob store unreachable (nothing persisted).
        """
        ensure_pdf(content, content_type)
        document = await self._get_document(user_id, document_name)
        filename = _attachment_filename(original_filename)

        await self.storage.upload(filename, content, PDF_MIME_TYPE)

        attachment = document.add_attachment(filename, expedition_date=expedition_date)
        try:
            await self.folder_repo.save_document(document)
        except Exception:
            logger.exception(
                "Persisting attachment %s failed; removing uploaded blob", filename
            )
            await self._discard_blob(filename)
            raise
        logger.info(
            "Attachment %s added to document '%s' of user %s",
            filename,
            document_name,
            user_id,
        )
        return attachment

    async def replace_attachment(
        self,
        user_id: str,
        document_name: str,
        content: bytes,
        content_type: str | None = PDF_MIME_TYPE,
    ) -> AttachmentEntity:
        """Overwrite the bytes of this month's attachment under the same filename.

        Raises:
            ValidationException: Not a PDF.
            ResourceNotFoundException: Document missing, or no attachment
                was created in the current calendar month.
        """
        ensure_pdf(content, content_type)
        document = await self._get_document(user_id, document_name)
        now = utc_now()
        attachment = document.attachment_for_month(now)
        if attachment is None:
            raise ResourceNotFoundException(
                "attachment", f"{document_name} ({now:%Y-%m})"
            )
        await self.storage.upload(attachment.filename, content, PDF_MIME_TYPE)
        document.mark_replaced(attachment, now=now)
        await self.folder_repo.save_document(document)
        return attachment


class AttachmentReviewService:
    """Reviewer actions on attachments: status changes and notifications."""

    def __init__(
        self,
        user_repo: IUserRepository,
        folder_repo: IFolderRepository,
        notifier: INotificationService,
    ) -> None:
        self.user_repo = user_repo
        self.folder_repo = folder_repo
        self.notifier = notifier

    async def update_status(
        self, document_number: str, filename: str, status: StatusAttachment
    ) -> AttachmentEntity:
        """Set an attachment's status, found by owner document number and filename.

        Setting the status it already has changes nothing.
        """
        user = await self.user_repo.get_by_document_number(document_number)
        if user is None:
            raise ResourceNotFoundException("user", document_number)
        document = await self.folder_repo.find_document_by_attachment(user.id, filename)
        attachment = document.find_attachment(filename) if document else None
        if document is None or attachment is None:
            raise ResourceNotFoundException("attachment", filename)
        if attachment.set_status(status):
            await self.folder_repo.save_document(document)
        return attachment

    async def send_review_notification(
        self,
        sender: UserEntity,
        email: str,
        user_id: str,
        details: str,
        notification_type: NotificationType,
    ) -> None:
        """Email a review notification.

        Raises:
            ValidationException: Missing email, user id or details.
            AuthorizationException: Sender may not send this notification type.
            ServiceUnavailableException: Delivery failed.
        """
        for field, value in (("email", email), ("user_id", user_id), ("details", details)):
            if not value or not value.strip():
                raise ValidationException(f"{field} is required", field=field)
        if not can_send_notification(sender.roles, notification_type):
            raise AuthorizationException(
                resource="notification", action=f"send {notification_type.value}"
            )
        await self.notifier.send_review_notification(
            email, notification_type, user_id, details
        )


class AttachmentQueryService:
    """Attachment listing and download."""

    def __init__(
        self,
        storage: IBlobStorage,
        user_repo: IUserRepository,
        folder_repo: IFolderRepository,
    ) -> None:
        self.storage = storage
        self.user_repo = user_repo
        self.folder_repo = folder_repo

    async def list_user_attachments(
        self, reader: UserEntity, user_id: str
    ) -> list[AttachmentEntity]:
        ensure_can_read_folder(reader, user_id)
        if await self.user_repo.get_by_id(user_id) is None:
            raise ResourceNotFoundException("user", user_id)
        folder = await self.folder_repo.get_folder(user_id)
        if folder is None or not folder.documents:
            raise ResourceNotFoundException("documents", user_id)
        return [a for d in folder.documents for a in d.attachments]

    async def download(
        self, reader: UserEntity, user_id: str, filename: str
    ) -> DownloadedAttachment:
        """Return the bytes of one of the user's attachments."""
        ensure_can_read_folder(reader, user_id)
        document = await self.folder_repo.find_document_by_attachment(user_id, filename)
        if document is None:
            raise ResourceNotFoundException("attachment", filename)
        content = await self.storage.download(filename)
        return DownloadedAttachment(
            filename=filename, content=content, content_type=PDF_MIME_TYPE
        )

    async def download_current(
        self, document_number: str, document_name: str
    ) -> DownloadedAttachment:
        """Return the current attachment of a user's document, named after the document.

        Raises:
            ResourceNotFoundException: User or document missing, or nothing uploaded yet.
        """
        user = await self.user_repo.get_by_document_number(document_number)
        if user is None:
            raise ResourceNotFoundException("user", document_number)
        document = await self.folder_repo.get_document(user.id, document_name)
        if document is None:
            raise ResourceNotFoundException("document", document_name)
        current = document.current_attachment
        if current is None:
            raise ResourceNotFoundException("attachment", f"{document_name} (no attachments)")
        content = await self.storage.download(current.filename)
        return DownloadedAttachment(
            filename=f"{document_name}.pdf", content=content, content_type=PDF_MIME_TYPE
        )

    async def list_storage_files(self, page: int, size: int) -> StoredFileList:
        request = PageRequest(page, size)
        return await self.storage.list_files(offset=request.offset, limit=request.size)
