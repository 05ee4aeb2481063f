"""Document and attachment dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from dossier.application.interfaces.services import IBlobStorage, INotificationService
from dossier.application.use_cases.documents import (
    AttachmentQueryService,
    AttachmentReviewService,
    AttachmentUploadService,
    DocumentLifecycleService,
)
from dossier.core.config import get_settings
from dossier.infrastructure.persistence.database import get_db, get_db_transactional
from dossier.infrastructure.persistence.repositories import (
    FolderRepository,
    RequisiteRepository,
    UserRepository,
)

from .services import get_blob_storage, get_notifier


async def get_attachment_upload_service(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
    storage: Annotated[IBlobStorage, Depends(get_blob_storage)],
) -> AttachmentUploadService:
    """Upload and replace attachments (blob store + folder repo, transactional)."""
    return AttachmentUploadService(storage=storage, folder_repo=FolderRepository(db))


async def get_attachment_review_service(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
    notifier: Annotated[INotificationService, Depends(get_notifier)],
) -> AttachmentReviewService:
    return AttachmentReviewService(
        user_repo=UserRepository(db),
        folder_repo=FolderRepository(db),
        notifier=notifier,
    )


async def get_attachment_query_service(
    db: Annotated[AsyncSession, Depends(get_db)],
    storage: Annotated[IBlobStorage, Depends(get_blob_storage)],
) -> AttachmentQueryService:
    """Attachment listing and download (read-only)."""
    return AttachmentQueryService(
        storage=storage,
        user_repo=UserRepository(db),
        folder_repo=FolderRepository(db),
    )


def _lifecycle(db: AsyncSession, notifier: INotificationService) -> DocumentLifecycleService:
    return DocumentLifecycleService(
        user_repo=UserRepository(db),
        folder_repo=FolderRepository(db),
        requisite_repo=RequisiteRepository(db),
        notifier=notifier,
        alert_days=get_settings().expiration_alert_days,
    )


async def get_document_lifecycle_service(
    db: Annotated[AsyncSession, Depends(get_db)],
    notifier: Annotated[INotificationService, Depends(get_notifier)],
) -> DocumentLifecycleService:
    """Document listing (read session)."""
    return _lifecycle(db, notifier)


async def get_document_lifecycle_service_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
    notifier: Annotated[INotificationService, Depends(get_notifier)],
) -> DocumentLifecycleService:
    """Expedition dates and state changes (transactional)."""
    return _lifecycle(db, notifier)
