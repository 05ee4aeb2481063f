"""Folder repository: a user's folder, its documents and their attachments."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from dossier.domain.entities import AttachmentEntity, DocumentEntity, FolderEntity
from dossier.domain.enums import State, StatusAttachment
from dossier.domain.exceptions import ResourceNotFoundException
from dossier.infrastructure.persistence.models.folder import Attachment, Document, Folder
from dossier.infrastructure.persistence.repositories.base import BaseRepository
from dossier.shared.utils.datetime import ensure_utc, utc_now


def _to_attachment(row: Attachment) -> AttachmentEntity:
    return AttachmentEntity(
        id=row.id,
        filename=row.filename,
        status=StatusAttachment(row.status),
        is_active=row.is_active,
        expedition_date=row.expedition_date,
        created_at=ensure_utc(row.created_at),
        updated_at=ensure_utc(row.updated_at),
    )


def _to_document(row: Document) -> DocumentEntity:
    return DocumentEntity(
        id=row.id,
        user_id=row.user_id,
        name=row.name,
        state=State(row.state),
        format=row.format,
        description=row.description,
        is_active=row.is_active,
        has_expiration=row.has_expiration,
        expiration_date=ensure_utc(row.expiration_date),
        rejection_message=row.rejection_message,
        attachments=[_to_attachment(a) for a in row.attachments],
        current_attachment_id=row.current_attachment_id,
        created_at=ensure_utc(row.created_at),
        updated_at=ensure_utc(row.updated_at),
    )


def _to_folder(row: Folder) -> FolderEntity:
    return FolderEntity(
        id=row.id,
        user_id=row.user_id,
        name=row.name,
        state=State(row.state),
        is_active=row.is_active,
        documents=[_to_document(d) for d in row.documents],
    )


class FolderRepository(BaseRepository[Folder]):
    """IFolderRepository over SQLAlchemy.

    Documents and attachments are loaded eagerly (selectin) with their folder.
    """

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Folder)

    async def create(self, folder: FolderEntity) -> FolderEntity:
        now = utc_now()
        row = Folder(
            id=folder.id,
            user_id=folder.user_id,
            name=folder.name,
            state=folder.state.value,
            is_active=folder.is_active,
            created_at=now,
            updated_at=now,
        )
        row.documents = [
            Document(
                id=d.id,
                folder_id=folder.id,
                user_id=d.user_id,
                name=d.name,
                state=d.state.value,
                format=d.format,
                description=d.description,
                is_active=d.is_active,
                has_expiration=d.has_expiration,
                expiration_date=d.expiration_date,
                created_at=d.created_at,
                updated_at=d.updated_at,
                attachments=[],
            )
            for d in folder.documents
        ]
        await self._add(row)
        return _to_folder(row)

    async def get_folder(self, user_id: str) -> FolderEntity | None:
        row = await self._get_row_by(Folder.user_id, user_id)
        return _to_folder(row) if row else None

    async def _get_document_row(self, user_id: str, name: str) -> Document | None:
        result = await self.db.execute(
            select(Document).where(Document.user_id == user_id, Document.name == name)
        )
        return result.scalars().first()

    async def get_document(self, user_id: str, name: str) -> DocumentEntity | None:
        row = await self._get_document_row(user_id, name)
        return _to_document(row) if row else None

    async def find_document_by_attachment(
        self, user_id: str, filename: str
    ) -> DocumentEntity | None:
        stmt = (
            select(Document)
            .join(Attachment, Attachment.document_id == Document.id)
            .where(Document.user_id == user_id, Attachment.filename == filename)
        )
        result = await self.db.execute(stmt)
        row = result.scalars().first()
        return _to_document(row) if row else None

    async def save_document(self, document: DocumentEntity) -> DocumentEntity:
        """Write document fields and upsert its attachments, then move the pointer.

        New attachment rows are flushed before current_attachment_id is set
        so the pointer never references a row that does not exist yet.
        """
        result = await self.db.execute(select(Document).where(Document.id == document.id))
        row = result.scalars().first()
        if row is None:
            raise ResourceNotFoundException("document", document.name)

        existing = {a.id: a for a in row.attachments}
        for attachment in document.attachments:
            att_row = existing.get(attachment.id)
            if att_row is None:
                row.attachments.append(
                    Attachment(
                        id=attachment.id,
                        document_id=row.id,
                        filename=attachment.filename,
                        status=attachment.status.value,
                        is_active=attachment.is_active,
                        expedition_date=attachment.expedition_date,
                        created_at=attachment.created_at,
                        updated_at=attachment.updated_at,
                    )
                )
                continue
            att_row.status = attachment.status.value
            att_row.is_active = attachment.is_active
            att_row.expedition_date = attachment.expedition_date
            att_row.updated_at = attachment.updated_at
        await self.db.flush()

        row.state = document.state.value
        row.is_active = document.is_active
        row.has_expiration = document.has_expiration
        row.expiration_date = document.expiration_date
        row.rejection_message = document.rejection_message
        row.current_attachment_id = document.current_attachment_id
        row.updated_at = document.updated_at
        await self.db.flush()
        return _to_document(row)
