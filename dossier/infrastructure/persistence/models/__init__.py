"""Persistence models: ORM entities and mixins."""

from dossier.infrastructure.persistence.models.catalog import (
    Group,
    Hiring,
    Profile,
    Requisite,
    Service,
    ServiceLocation,
    hiring_requisite,
    profile_requisite,
    service_profile,
    service_requisite,
)
from dossier.infrastructure.persistence.models.expiration_log import ExpirationLog
from dossier.infrastructure.persistence.models.folder import Attachment, Document, Folder
from dossier.infrastructure.persistence.models.mixins import (
    BaseModel,
    CuidMixin,
    TimestampMixin,
)
from dossier.infrastructure.persistence.models.user import User

__all__ = [
    "Attachment",
    "BaseModel",
    "CuidMixin",
    "Document",
    "ExpirationLog",
    "Folder",
    "Group",
    "Hiring",
    "Profile",
    "Requisite",
    "Service",
    "ServiceLocation",
    "TimestampMixin",
    "User",
    "hiring_requisite",
    "profile_requisite",
    "service_profile",
    "service_requisite",
]
