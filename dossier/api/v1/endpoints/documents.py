"""Document API: listing, review state, expedition dates, current-file download."""

from typing import Annotated
from urllib.parse import quote

from fastapi import APIRouter, Depends, Request, Response

from dossier.api.v1.dependencies import (
    get_attachment_query_service,
    get_current_user,
    get_document_lifecycle_service,
    get_document_lifecycle_service_for_write,
    require_reviewer,
)
from dossier.application.use_cases.documents import (
    AttachmentQueryService,
    DocumentLifecycleService,
)
from dossier.core.limiter import limit_writes
from dossier.domain.entities import UserEntity
from dossier.schemas.document import (
    DocumentResponse,
    DocumentStateUpdateRequest,
    ExpeditionDateRequest,
    ExpeditionDateResponse,
)

router = APIRouter()


@router.put("/expedition-date", response_model=ExpeditionDateResponse)
@limit_writes
async def set_expedition_date(
    request: Request,
    body: ExpeditionDateRequest,
    lifecycle: Annotated[
        DocumentLifecycleService, Depends(get_document_lifecycle_service_for_write)
    ],
    _: Annotated[UserEntity, Depends(require_reviewer)],
):
    """Record an attachment's expedition date and recompute the document's expiration.

    Defined before /{user_id} routes for route precedence.
    """
    result = await lifecycle.set_expedition_date(
        document_number=body.document_number,
        document_name=body.document_name,
        filename=body.filename,
        expedition_date=body.expedition_date,
    )
    return ExpeditionDateResponse(
        document=DocumentResponse.model_validate(result.document),
        expiration_message=result.expiration_message,
    )


@router.get("/{user_id}", response_model=list[DocumentResponse])
async def list_documents(
    user_id: str,
    lifecycle: Annotated[DocumentLifecycleService, Depends(get_document_lifecycle_service)],
    current_user: Annotated[UserEntity, Depends(get_current_user)],
):
    """List the documents in a user's folder. Collaborators only see their own."""
    documents = await lifecycle.list_documents(current_user, user_id)
    return [DocumentResponse.model_validate(d) for d in documents]


@router.patch("/{user_id}/{document_name}/state", response_model=DocumentResponse)
@limit_writes
async def update_document_state(
    request: Request,
    user_id: str,
    document_name: str,
    body: DocumentStateUpdateRequest,
    lifecycle: Annotated[
        DocumentLifecycleService, Depends(get_document_lifecycle_service_for_write)
    ],
    _: Annotated[UserEntity, Depends(require_reviewer)],
):
    """Approve or reject a document; the state is copied onto its current attachment."""
    document = await lifecycle.update_document_state(
        user_id, document_name, body.state, body.rejection_message
    )
    return DocumentResponse.model_validate(document)


def _content_disposition(filename: str) -> str:
    quoted = quote(filename)
    if quoted == filename:
        return f'attachment; filename="{filename}"'
    return f"attachment; filename*=utf-8''{quoted}"


@router.get("/{document_number}/download/{document_name}")
async def download_current_document(
    document_number: str,
    document_name: str,
    queries: Annotated[AttachmentQueryService, Depends(get_attachment_query_service)],
    _: Annotated[UserEntity, Depends(require_reviewer)],
):
    """Download the latest file of a document as '<document name>.pdf'."""
    downloaded = await queries.download_current(document_number, document_name)
    return Response(
        content=downloaded.content,
        media_type=downloaded.content_type,
        headers={"Content-Disposition": _content_disposition(downloaded.filename)},
    )
