"""Pydantic request/response schemas for the API."""

from dossier.schemas.catalog import (
    GroupCreateRequest,
    GroupResponse,
    HiringCreateRequest,
    HiringResponse,
    LocationSchema,
    ProfileCreateRequest,
    ProfileResponse,
    ServiceCreateRequest,
    ServiceResponse,
)
from dossier.schemas.document import (
    AttachmentResponse,
    AttachmentStatusUpdateRequest,
    DocumentResponse,
    DocumentStateUpdateRequest,
    ExpeditionDateRequest,
    ExpeditionDateResponse,
    ReviewNotificationRequest,
    StoredFileListResponse,
)
from dossier.schemas.expiration import (
    ExpirationLogEntrySchema,
    ExpirationLogResponse,
    ExpirationSweepResponse,
)
from dossier.schemas.health import HealthResponse
from dossier.schemas.requisite import (
    RequisiteCreateRequest,
    RequisiteImportResponse,
    RequisiteListResponse,
    RequisiteResponse,
    RequisiteUpdateRequest,
)
from dossier.schemas.user import UserCreateRequest, UserListResponse, UserResponse

__all__ = [
    "AttachmentResponse",
    "AttachmentStatusUpdateRequest",
    "DocumentResponse",
    "DocumentStateUpdateRequest",
    "ExpeditionDateRequest",
    "ExpeditionDateResponse",
    "ExpirationLogEntrySchema",
    "ExpirationLogResponse",
    "ExpirationSweepResponse",
    "GroupCreateRequest",
    "GroupResponse",
    "HealthResponse",
    "HiringCreateRequest",
    "HiringResponse",
    "LocationSchema",
    "ProfileCreateRequest",
    "ProfileResponse",
    "RequisiteCreateRequest",
    "RequisiteImportResponse",
    "RequisiteListResponse",
    "RequisiteResponse",
    "RequisiteUpdateRequest",
    "ServiceCreateRequest",
    "ServiceResponse",
    "StoredFileListResponse",
    "UserCreateRequest",
    "UserListResponse",
    "UserResponse",
]
