"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference domain entities or application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from dossier.application.dtos.catalog import ServiceCreate
    from dossier.application.dtos.common import Page, PageRequest
    from dossier.application.dtos.expiration import (
        ExpirationLogEntry,
        ExpirationLogResult,
    )
    from dossier.application.dtos.user import UserFilters
    from dossier.domain.entities import (
        DocumentEntity,
        FolderEntity,
        GroupEntity,
        HiringEntity,
        ProfileEntity,
        RequisiteEntity,
        ServiceEntity,
        UserEntity,
    )


# Requisite repository interface
class IRequisiteRepository(Protocol):
    """Protocol for the requisite catalog."""

    async def get_by_id(self, requisite_id: str) -> RequisiteEntity | None:
        """Return requisite by ID."""

    async def get_by_name(self, name: str) -> RequisiteEntity | None:
        """Return requisite by exact name."""

    async def get_by_names(self, names: list[str]) -> list[RequisiteEntity]:
        """Return requisites whose name is in names (missing names are omitted)."""

    async def list_page(
        self, page: PageRequest, name: str | None = None
    ) -> Page[RequisiteEntity]:
        """Return one page of requisites, optionally filtered by name (case-insensitive)."""

    async def create(self, requisite: RequisiteEntity) -> RequisiteEntity:
        """Persist a new (already validated) requisite."""

    async def update(self, requisite: RequisiteEntity) -> RequisiteEntity:
        """Persist changes to an existing requisite."""


# Group repository interface
class IGroupRepository(Protocol):
    """Protocol for groups."""

    async def get_by_id(self, group_id: str) -> GroupEntity | None:
        """Return group by ID."""

    async def get_by_name(self, name: str) -> GroupEntity | None:
        """Return group by name."""

    async def list_all(self) -> list[GroupEntity]:
        """Return all groups ordered by name."""

    async def create(self, name: str, is_active: bool = True) -> GroupEntity:
        """Create a group."""

    async def update(self, group: GroupEntity) -> GroupEntity:
        """Persist name and active flag of an existing group."""


# Profile repository interface
class IProfileRepository(Protocol):
    """Protocol for profiles (with their requisites)."""

    async def get_by_id(self, profile_id: str) -> ProfileEntity | None:
        """Return profile by ID with requisites loaded."""

    async def get_by_name(self, name: str) -> ProfileEntity | None:
        """Return profile by name with requisites loaded."""

    async def get_by_names(self, names: list[str]) -> list[ProfileEntity]:
        """Return profiles whose name is in names."""

    async def list_all(self) -> list[ProfileEntity]:
        """Return all profiles ordered by name."""

    async def create(
        self, name: str, requisites: list[RequisiteEntity], is_active: bool = True
    ) -> ProfileEntity:
        """Create a profile linked to requisites."""

    async def update(self, profile: ProfileEntity) -> ProfileEntity:
        """Persist name, active flag and the requisite set of an existing profile."""


# Hiring repository interface
class IHiringRepository(Protocol):
    """Protocol for hiring types (with their requisites)."""

    async def get_by_id(self, hiring_id: str) -> HiringEntity | None:
        """Return hiring by ID with requisites loaded."""

    async def get_by_type(self, hiring_type: str) -> HiringEntity | None:
        """Return hiring by type with requisites loaded."""

    async def list_all(self) -> list[HiringEntity]:
        """Return all hirings ordered by type."""

    async def create(
        self, hiring_type: str, requisites: list[RequisiteEntity], is_active: bool = True
    ) -> HiringEntity:
        """Create a hiring type linked to requisites."""

    async def update(self, hiring: HiringEntity) -> HiringEntity:
        """Persist type, active flag and the requisite set of an existing hiring."""


# Service repository interface
class IServiceRepository(Protocol):
    """Protocol for services (group, profiles, requisites, locations)."""

    async def get_by_id(self, service_id: str) -> ServiceEntity | None:
        """Return service by ID with group, profiles and requisites loaded."""

    async def get_by_name(self, name: str) -> ServiceEntity | None:
        """Return service by name with group, profiles and requisites loaded."""

    async def get_by_names(self, names: list[str]) -> list[ServiceEntity]:
        """Return services whose name is in names."""

    async def list_all(self) -> list[ServiceEntity]:
        """Return all services ordered by name."""

    async def list_by_group(self, group_name: str) -> list[ServiceEntity]:
        """Return services belonging to the named group."""

    async def create(
        self,
        data: ServiceCreate,
        group: GroupEntity,
        profiles: list[ProfileEntity],
        requisites: list[RequisiteEntity],
    ) -> ServiceEntity:
        """Create a service."""

    async def update(self, service: ServiceEntity) -> ServiceEntity:
        """Persist an existing service, replacing its profiles, requisites and locations."""


# User repository interface
class IUserRepository(Protocol):
    """Protocol for user accounts."""

    async def get_by_id(self, user_id: str) -> UserEntity | None:
        """Return user by ID."""

    async def get_by_email(self, email: str) -> UserEntity | None:
        """Return user by email (case-insensitive)."""

    async def get_by_id_document(self, doc_type: str, number: str) -> UserEntity | None:
        """Return user by identity document type and number."""

    async def get_by_document_number(self, number: str) -> UserEntity | None:
        """Return user by identity document number."""

    async def list_page(
        self, page: PageRequest, filters: UserFilters | None = None
    ) -> Page[UserEntity]:
        """Return one page of users matching filters."""

    async def list_active(self) -> list[UserEntity]:
        """Return all active users (used by the expiration sweep)."""

    async def create(self, user: UserEntity, password_hash: str) -> UserEntity:
        """Create a user with a hashed password."""

    async def update(self, user: UserEntity) -> UserEntity:
        """Persist profile fields, roles and the active flag of an existing user."""


# Folder / document repository interface
class IFolderRepository(Protocol):
    """Protocol for a user's folder, documents and attachments."""

    async def create(self, folder: FolderEntity) -> FolderEntity:
        """Persist a freshly scaffolded folder and its documents."""

    async def get_folder(self, user_id: str) -> FolderEntity | None:
        """Return the user's folder with documents and attachments loaded."""

    async def get_document(self, user_id: str, name: str) -> DocumentEntity | None:
        """Return one document (with attachments) by owner and name."""

    async def find_document_by_attachment(
        self, user_id: str, filename: str
    ) -> DocumentEntity | None:
        """Return the user's document that owns the attachment filename."""

    async def save_document(self, document: DocumentEntity) -> DocumentEntity:
        """Persist document state, new attachments and the current-attachment pointer."""


# Expiration log repository interface
class IExpirationLogRepository(Protocol):
    """Protocol for expiration logs (append-only)."""

    async def create(
        self, user_id: str, entries: list[ExpirationLogEntry]
    ) -> ExpirationLogResult:
        """Append one log for a user."""

    async def list_by_user(self, user_id: str) -> list[ExpirationLogResult]:
        """Return the user's logs, newest first."""


# Opens one transaction per call; commits on clean exit, rolls back on error.
ExpirationLogScope = Callable[[], AbstractAsyncContextManager["IExpirationLogRepository"]]
