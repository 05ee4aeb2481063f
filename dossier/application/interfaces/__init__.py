"""Application ports: repository and external service protocols."""

from dossier.application.interfaces.repositories import (
    ExpirationLogScope,
    IExpirationLogRepository,
    IFolderRepository,
    IGroupRepository,
    IHiringRepository,
    IProfileRepository,
    IRequisiteRepository,
    IServiceRepository,
    IUserRepository,
)
from dossier.application.interfaces.services import (
    IBlobStorage,
    INotificationService,
    IPasswordHasher,
)

__all__ = [
    "ExpirationLogScope",
    "IBlobStorage",
    "IExpirationLogRepository",
    "IFolderRepository",
    "IGroupRepository",
    "IHiringRepository",
    "INotificationService",
    "IPasswordHasher",
    "IProfileRepository",
    "IRequisiteRepository",
    "IServiceRepository",
    "IUserRepository",
]
