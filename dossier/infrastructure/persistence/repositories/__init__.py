"""SQLAlchemy repositories. Each returns domain entities or application DTOs."""

from dossier.infrastructure.persistence.repositories.catalog_repo import (
    GroupRepository,
    HiringRepository,
    ProfileRepository,
    ServiceRepository,
)
from dossier.infrastructure.persistence.repositories.expiration_log_repo import (
    ExpirationLogRepository,
    sql_expiration_log_scope,
)
from dossier.infrastructure.persistence.repositories.folder_repo import FolderRepository
from dossier.infrastructure.persistence.repositories.requisite_repo import (
    RequisiteRepository,
)
from dossier.infrastructure.persistence.repositories.user_repo import UserRepository

__all__ = [
    "ExpirationLogRepository",
    "FolderRepository",
    "GroupRepository",
    "HiringRepository",
    "ProfileRepository",
    "RequisiteRepository",
    "ServiceRepository",
    "UserRepository",
    "sql_expiration_log_scope",
]
