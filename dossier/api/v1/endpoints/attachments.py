"""Attachment API: upload, replace, review, notify, list and download."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from fastapi.responses import Response

from dossier.api.v1.dependencies import (
    get_attachment_query_service,
    get_attachment_review_service,
    get_attachment_upload_service,
    get_current_user,
    require_catalog_admin,
    require_folder_access,
    require_reviewer,
)
from dossier.application.use_cases.documents import (
    AttachmentQueryService,
    AttachmentReviewService,
    AttachmentUploadService,
)
from dossier.core.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from dossier.core.limiter import limit_upload, limit_writes
from dossier.domain.entities import UserEntity
from dossier.schemas.document import (
    AttachmentResponse,
    AttachmentStatusUpdateRequest,
    ReviewNotificationRequest,
    StoredFileListResponse,
)

router = APIRouter()


@router.get("/storage/files", response_model=StoredFileListResponse)
async def list_storage_files(
    queries: Annotated[AttachmentQueryService, Depends(get_attachment_query_service)],
    _: Annotated[UserEntity, Depends(require_catalog_admin)],
    page: int = DEFAULT_PAGE,
    size: int = DEFAULT_PAGE_SIZE,
):
    """List files in the blob store (page >= 1, 1 <= size <= 50)."""
    result = await queries.list_storage_files(page, size)
    return StoredFileListResponse(items=result.items, count=result.count)


@router.patch("/status", response_model=AttachmentResponse)
@limit_writes
async def update_attachment_status(
    request: Request,
    body: AttachmentStatusUpdateRequest,
    review: Annotated[AttachmentReviewService, Depends(get_attachment_review_service)],
    _: Annotated[UserEntity, Depends(require_reviewer)],
):
    """Set an attachment's status by owner document number and filename. Idempotent."""
    attachment = await review.update_status(
        body.document_number, body.filename, body.status
    )
    return AttachmentResponse.model_validate(attachment)


@router.post("/notify", status_code=204)
@limit_writes
async def send_review_notification(
    request: Request,
    body: ReviewNotificationRequest,
    review: Annotated[AttachmentReviewService, Depends(get_attachment_review_service)],
    current_user: Annotated[UserEntity, Depends(get_current_user)],
):
    """Email a review notification (revisor notifications need a reviewer role)."""
    await review.send_review_notification(
        sender=current_user,
        email=body.email,
        user_id=body.user_id,
        details=body.details,
        notification_type=body.type,
    )


@router.get("/{user_id}", response_model=list[AttachmentResponse])
async def list_user_attachments(
    user_id: str,
    queries: Annotated[AttachmentQueryService, Depends(get_attachment_query_service)],
    current_user: Annotated[UserEntity, Depends(get_current_user)],
):
    attachments = await queries.list_user_attachments(current_user, user_id)
    return [AttachmentResponse.model_validate(a) for a in attachments]


@router.get("/{user_id}/files/{filename}")
async def download_attachment(
    user_id: str,
    filename: str,
    queries: Annotated[AttachmentQueryService, Depends(get_attachment_query_service)],
    current_user: Annotated[UserEntity, Depends(get_current_user)],
):
    """Return an attachment's bytes (404 when the user does not own it)."""
    downloaded = await queries.download(current_user, user_id, filename)
    return Response(
        content=downloaded.content,
        media_type=downloaded.content_type,
        headers={"Content-Disposition": f'inline; filename="{downloaded.filename}"'},
    )


@router.post(
    "/{user_id}/{document_name}",
    response_model=AttachmentResponse,
    status_code=201,
)
@limit_upload
async def upload_attachment(
    request: Request,
    user_id: str,
    document_name: str,
    upload: Annotated[AttachmentUploadService, Depends(get_attachment_upload_service)],
    _: Annotated[UserEntity, Depends(require_folder_access)],
    file: UploadFile = File(...),
    expedition_date: date | None = Form(None),
):
    """Upload a PDF as a new pending attachment of the document."""
    attachment = await upload.create_attachment(
        user_id=user_id,
        document_name=document_name,
        content=await file.read(),
        original_filename=file.filename,
        content_type=file.content_type,
        expedition_date=expedition_date,
    )
    return AttachmentResponse.model_validate(attachment)


@router.put("/{user_id}/{document_name}", response_model=AttachmentResponse)
@limit_upload
async def replace_attachment(
    request: Request,
    user_id: str,
    document_name: str,
    upload: Annotated[AttachmentUploadService, Depends(get_attachment_upload_service)],
    _: Annotated[UserEntity, Depends(require_folder_access)],
    file: UploadFile = File(...),
):
    """Overwrite this month's attachment of the document, keeping its filename."""
    attachment = await upload.replace_attachment(
        user_id=user_id,
        document_name=document_name,
        content=await file.read(),
        content_type=file.content_type,
    )
    return AttachmentResponse.model_validate(attachment)
