"""Document lifecycle: expedition dates, review state, and listing."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dossier.application.dtos.document import ExpeditionDateResult
from dossier.application.use_cases.documents.attachment_operations import (
    ensure_can_read_folder,
)
from dossier.domain.enums import State
from dossier.domain.exceptions import (
    ResourceNotFoundException,
    ServiceUnavailableException,
    ValidationException,
)
from dossier.domain.expiration import compute_expiration_date, expiration_message
from dossier.shared.utils.datetime import utc_now

if TYPE_CHECKING:
    from datetime import date

    from dossier.application.interfaces.repositories import (
        IFolderRepository,
        IRequisiteRepository,
        IUserRepository,
    )
    from dossier.application.interfaces.services import INotificationService
    from dossier.domain.entities import DocumentEntity, UserEntity

logger = logging.getLogger(__name__)


def parse_state(value: State | str) -> State:
    """Return value as a State; ValidationException for unknown values."""
    if isinstance(value, State):
        return value
    try:
        return State(value)
    except ValueError as exc:
        raise ValidationException(
            f"Invalid state '{value}'. Must be one of: {', '.join(State.values())}",
            field="state",
        ) from exc


class DocumentLifecycleService:
    """State changes on a user's documents."""

    def __init__(
        self,
        user_repo: IUserRepository,
        folder_repo: IFolderRepository,
        requisite_repo: IRequisiteRepository,
        notifier: INotificationService,
        alert_days: int,
    ) -> None:
        self.user_repo = user_repo
        self.folder_repo = folder_repo
        self.requisite_repo = requisite_repo
        self.notifier = notifier
        self.alert_days = alert_days

    async def set_expedition_date(
        self,
        document_number: str,
        document_name: str,
        filename: str,
        expedition_date: date | None,
    ) -> ExpeditionDateResult:
        """Record an attachment's expedition date and recompute the document's expiration.

        expiration_date = expedition_date + requisite validity (Day = 1,
        Month = 30, Year = 365.25 days).

        Raises:
            ResourceNotFoundException: User, document, attachment or requisite missing.
            ValidationException: No expedition date, or the requisite does not
                require validity.
        """
        user = await self.user_repo.get_by_document_number(document_number)
        if user is None:
            raise ResourceNotFoundException("user", document_number)
        document = await self.folder_repo.get_document(user.id, document_name)
        if document is None:
            raise ResourceNotFoundException("document", document_name)
        attachment = document.find_attachment(filename)
        if attachment is None:
            raise ResourceNotFoundException("attachment", filename)
        requisite = await self.requisite_repo.get_by_name(document_name)
        if requisite is None:
            raise ResourceNotFoundException("requisite", document_name)

        expiration_date = compute_expiration_date(expedition_date, requisite)

        now = utc_now()
        attachment.expedition_date = expedition_date
        attachment.updated_at = now
        document.apply_expiration(expiration_date, now=now)
        saved = await self.folder_repo.save_document(document)

        message = expiration_message(document_name, expiration_date, now, self.alert_days)
        try:
            await self.notifier.send_expiration_update(
                user.email, document_name, expiration_date, message
            )
        except ServiceUnavailableException as exc:
            logger.warning(
                "Expiration update email to user %s failed: %s", user.id, exc.message
            )
        return ExpeditionDateResult(
            document=saved, attachment=attachment, expiration_message=message
        )

    async def update_document_state(
        self,
        user_id: str,
        document_name: str,
        state: State | str,
        rejection_message: str | None = None,
    ) -> DocumentEntity:
        """Set a document's review state and propagate it onto its current attachment.

        Raises:
            ValidationException: Unknown state or rejection message too long.
            ResourceNotFoundException: User or document missing, or the
                document has no attachments.
        """
        new_state = parse_state(state)
        if await self.user_repo.get_by_id(user_id) is None:
            raise ResourceNotFoundException("user", user_id)
        document = await self.folder_repo.get_document(user_id, document_name)
        if document is None:
            raise ResourceNotFoundException("document", document_name)
        document.change_state(new_state, rejection_message)
        return await self.folder_repo.save_document(document)

    async def list_documents(self, reader: UserEntity, user_id: str) -> list[DocumentEntity]:
        """Return the documents in a user's folder. Collaborators only see their own."""
        ensure_can_read_folder(reader, user_id)
        if await self.user_repo.get_by_id(user_id) is None:
            raise ResourceNotFoundException("user", user_id)
        folder = await self.folder_repo.get_folder(user_id)
        if folder is None or not folder.documents:
            raise ResourceNotFoundException("documents", user_id)
        return folder.documents
