"""Domain layer: entities, enums, policies, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from dossier.domain.entities import (
    AttachmentEntity,
    DocumentEntity,
    FolderEntity,
    RequisiteEntity,
    UserEntity,
    scaffold_folder,
)
from dossier.domain.enums import Role, State, StatusAttachment, ValidityUnit
from dossier.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    DossierException,
    ResourceAlreadyExistsException,
    ResourceNotFoundException,
    ServiceUnavailableException,
    ValidationException,
)

__all__ = [
    # Entities
    "AttachmentEntity",
    "DocumentEntity",
    "FolderEntity",
    "RequisiteEntity",
    "UserEntity",
    "scaffold_folder",
    # Enums
    "Role",
    "State",
    "StatusAttachment",
    "ValidityUnit",
    # Exceptions
    "AuthenticationException",
    "AuthorizationException",
    "DossierException",
    "ResourceAlreadyExistsException",
    "ResourceNotFoundException",
    "ServiceUnavailableException",
    "ValidationException",
]
