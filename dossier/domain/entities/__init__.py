"""Domain entities and aggregates.

Pure domain models; no ORM or persistence concerns.
"""

from dossier.domain.entities.catalog import (
    GroupEntity,
    HiringEntity,
    Location,
    ProfileEntity,
    ServiceEntity,
)
from dossier.domain.entities.folder import (
    AttachmentEntity,
    DocumentEntity,
    FolderEntity,
    scaffold_folder,
)
from dossier.domain.entities.requisite import RequisiteEntity
from dossier.domain.entities.user import IdDocument, UserEntity

__all__ = [
    "AttachmentEntity",
    "DocumentEntity",
    "FolderEntity",
    "GroupEntity",
    "HiringEntity",
    "IdDocument",
    "Location",
    "ProfileEntity",
    "RequisiteEntity",
    "ServiceEntity",
    "UserEntity",
    "scaffold_folder",
]
