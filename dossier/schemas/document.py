"""Document and attachment API schemas."""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from dossier.domain.enums import NotificationType, State, StatusAttachment


class AttachmentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    filename: str
    status: StatusAttachment
    is_active: bool
    expedition_date: date | None = None
    created_at: datetime
    updated_at: datetime


class DocumentResponse(BaseModel):
    """A required document in a user's folder, with its attachments."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    name: str
    state: State
    format: str | None = None
    description: str | None = None
    is_active: bool
    has_expiration: bool
    expiration_date: datetime | None = None
    rejection_message: str | None = None
    current_attachment_id: str | None = None
    attachments: list[AttachmentResponse]
    updated_at: datetime


class DocumentStateUpdateRequest(BaseModel):
    """Request body for PATCH /documents/{user_id}/{document_name}/state.

    state is validated by the use case so unknown values map to 400.
    """

    state: str
    rejection_message: str | None = None


class ExpeditionDateRequest(BaseModel):
    """Request body for PUT /documents/expedition-date."""

    document_number: str = Field(..., min_length=1)
    document_name: str = Field(..., min_length=1)
    filename: str = Field(..., min_length=1)
    expedition_date: date | None = None


class ExpeditionDateResponse(BaseModel):
    document: DocumentResponse
    expiration_message: str


class AttachmentStatusUpdateRequest(BaseModel):
    """Request body for PATCH /attachments/status."""

    document_number: str = Field(..., min_length=1)
    filename: str = Field(..., min_length=1)
    status: StatusAttachment


class ReviewNotificationRequest(BaseModel):
    """Request body for POST /attachments/notify."""

    email: str
    user_id: str
    details: str = Field(..., max_length=2000)
    type: NotificationType


class StoredFileListResponse(BaseModel):
    """One page of the blob store listing."""

    items: list[dict[str, Any]]
    count: int
