"""Application DTOs (no ORM dependency)."""

from dossier.application.dtos.catalog import (
    GroupUpdate,
    HiringCreate,
    HiringUpdate,
    LocationData,
    ProfileCreate,
    ProfileUpdate,
    RequisiteCreate,
    RequisiteImportResult,
    RequisiteUpdate,
    ServiceCreate,
    ServiceUpdate,
)
from dossier.application.dtos.common import Page, PageRequest
from dossier.application.dtos.document import (
    DownloadedAttachment,
    ExpeditionDateResult,
    StoredFileList,
)
from dossier.application.dtos.expiration import (
    ExpirationLogEntry,
    ExpirationLogResult,
    ExpirationSweepSummary,
)
from dossier.application.dtos.user import UserCreate, UserFilters, UserUpdate

__all__ = [
    "DownloadedAttachment",
    "ExpeditionDateResult",
    "ExpirationLogEntry",
    "ExpirationLogResult",
    "ExpirationSweepSummary",
    "GroupUpdate",
    "HiringCreate",
    "HiringUpdate",
    "LocationData",
    "Page",
    "PageRequest",
    "ProfileCreate",
    "ProfileUpdate",
    "RequisiteCreate",
    "RequisiteImportResult",
    "RequisiteUpdate",
    "ServiceCreate",
    "ServiceUpdate",
    "StoredFileList",
    "UserCreate",
    "UserFilters",
    "UserUpdate",
]
