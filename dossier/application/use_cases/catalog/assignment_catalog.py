"""Assignment catalog: groups, profiles, hirings, and services."""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any

from dossier.domain.entities import (
    GroupEntity,
    HiringEntity,
    Location,
    ProfileEntity,
    RequisiteEntity,
    ServiceEntity,
)
from dossier.domain.enums import ServiceCategory
from dossier.domain.exceptions import (
    ResourceAlreadyExistsException,
    ResourceNotFoundException,
    ValidationException,
)

if TYPE_CHECKING:
    from dossier.application.dtos.catalog import (
        GroupUpdate,
        HiringCreate,
        HiringUpdate,
        ProfileCreate,
        ProfileUpdate,
        ServiceCreate,
        ServiceUpdate,
    )
    from dossier.application.interfaces.repositories import (
        IGroupRepository,
        IHiringRepository,
        IProfileRepository,
        IRequisiteRepository,
        IServiceRepository,
    )


def _require_unique_names(names: list[str], field: str, label: str) -> None:
    if not names:
        raise ValidationException(f"At least one {label} is required", field=field)
    if len(set(names)) != len(names):
        raise ValidationException(f"Duplicate {label}s are not allowed", field=field)


def _changes(update: Any) -> dict[str, Any]:
    """Fields of a partial-update DTO that were actually given."""
    return {
        f.name: getattr(update, f.name)
        for f in dataclasses.fields(update)
        if getattr(update, f.name) is not None
    }


class AssignmentCatalogService:
    """Creates, updates and lists the entities a user's requisites are derived from.

    Updates only touch the catalog. Folders already scaffolded from a
    profile, hiring or service keep their documents.
    """

    def __init__(
        self,
        requisite_repo: IRequisiteRepository,
        group_repo: IGroupRepository,
        profile_repo: IProfileRepository,
        hiring_repo: IHiringRepository,
        service_repo: IServiceRepository,
    ) -> None:
        self.requisite_repo = requisite_repo
        self.group_repo = group_repo
        self.profile_repo = profile_repo
        self.hiring_repo = hiring_repo
        self.service_repo = service_repo

    async def _load_requisites(self, names: list[str]) -> list[RequisiteEntity]:
        _require_unique_names(names, "requisite_names", "requisite")
        requisites = await self.requisite_repo.get_by_names(names)
        found = {r.name for r in requisites}
        missing = [n for n in names if n not in found]
        if missing:
            raise ResourceNotFoundException("requisite", ", ".join(missing))
        return requisites

    async def _load_profiles(self, names: list[str]) -> list[ProfileEntity]:
        _require_unique_names(names, "profile_names", "profile")
        profiles = await self.profile_repo.get_by_names(names)
        found = {p.name for p in profiles}
        missing = [n for n in names if n not in found]
        if missing:
            raise ResourceNotFoundException("profile", ", ".join(missing))
        return profiles

    # Groups

    async def create_group(self, name: str, is_active: bool = True) -> GroupEntity:
        name = name.strip()
        if await self.group_repo.get_by_name(name) is not None:
            raise ResourceAlreadyExistsException("group", name)
        return await self.group_repo.create(name, is_active=is_active)

    async def list_groups(self) -> list[GroupEntity]:
        return await self.group_repo.list_all()

    async def update_group(self, group_id: str, changes: GroupUpdate) -> GroupEntity:
        """Rename or (de)activate a group.

        Raises:
            ResourceNotFoundException: No group with group_id.
            ResourceAlreadyExistsException: Another group has the new name.
        """
        group = await self.group_repo.get_by_id(group_id)
        if group is None:
            raise ResourceNotFoundException("group", group_id)
        if changes.name is not None:
            name = changes.name.strip()
            existing = await self.group_repo.get_by_name(name)
            if existing is not None and existing.id != group.id:
                raise ResourceAlreadyExistsException("group", name)
            group.name = name
        if changes.is_active is not None:
            group.is_active = changes.is_active
        return await self.group_repo.update(group)

    # Profiles

    async def create_profile(self, data: ProfileCreate) -> ProfileEntity:
        if await self.profile_repo.get_by_name(data.name) is not None:
            raise ResourceAlreadyExistsException("profile", data.name)
        requisites = await self._load_requisites(data.requisite_names)
        return await self.profile_repo.create(
            data.name, requisites, is_active=data.is_active
        )

    async def list_profiles(self) -> list[ProfileEntity]:
        return await self.profile_repo.list_all()

    async def update_profile(self, profile_id: str, changes: ProfileUpdate) -> ProfileEntity:
        """Rename, (de)activate or replace the requisites of a profile."""
        profile = await self.profile_repo.get_by_id(profile_id)
        if profile is None:
            raise ResourceNotFoundException("profile", profile_id)
        if changes.name is not None:
            name = changes.name.strip()
            existing = await self.profile_repo.get_by_name(name)
            if existing is not None and existing.id != profile.id:
                raise ResourceAlreadyExistsException("profile", name)
            profile.name = name
        if changes.requisite_names is not None:
            profile.requisites = await self._load_requisites(changes.requisite_names)
        if changes.is_active is not None:
            profile.is_active = changes.is_active
        return await self.profile_repo.update(profile)

    # Hirings

    async def create_hiring(self, data: HiringCreate) -> HiringEntity:
        if await self.hiring_repo.get_by_type(data.type) is not None:
            raise ResourceAlreadyExistsException("hiring", data.type)
        requisites = await self._load_requisites(data.requisite_names)
        return await self.hiring_repo.create(
            data.type, requisites, is_active=data.is_active
        )

    async def list_hirings(self) -> list[HiringEntity]:
        return await self.hiring_repo.list_all()

    async def update_hiring(self, hiring_id: str, changes: HiringUpdate) -> HiringEntity:
        hiring = await self.hiring_repo.get_by_id(hiring_id)
        if hiring is None:
            raise ResourceNotFoundException("hiring", hiring_id)
        if changes.type is not None:
            hiring_type = changes.type.strip()
            existing = await self.hiring_repo.get_by_type(hiring_type)
            if existing is not None and existing.id != hiring.id:
                raise ResourceAlreadyExistsException("hiring", hiring_type)
            hiring.type = hiring_type
        if changes.requisite_names is not None:
            hiring.requisites = await self._load_requisites(changes.requisite_names)
        if changes.is_active is not None:
            hiring.is_active = changes.is_active
        return await self.hiring_repo.update(hiring)

    # Services

    async def create_service(self, data: ServiceCreate) -> ServiceEntity:
        """Create a service.

        Raises:
            ValidationException: Care service without code, no or duplicate
                profiles/requisites.
            ResourceAlreadyExistsException: Service name taken.
            ResourceNotFoundException: Group, a profile or a requisite missing.
        """
        if data.category == ServiceCategory.CARE and data.code is None:
            raise ValidationException(
                f"code is required for category '{ServiceCategory.CARE.value}'",
                field="code",
            )
        if await self.service_repo.get_by_name(data.name) is not None:
            raise ResourceAlreadyExistsException("service", data.name)
        group = await self.group_repo.get_by_name(data.group_name)
        if group is None:
            raise ResourceNotFoundException("group", data.group_name)
        profiles = await self._load_profiles(data.profile_names)
        requisites = await self._load_requisites(data.requisite_names)
        return await self.service_repo.create(data, group, profiles, requisites)

    async def list_services(self) -> list[ServiceEntity]:
        return await self.service_repo.list_all()

    async def list_services_by_group(self, group_name: str) -> list[ServiceEntity]:
        if await self.group_repo.get_by_name(group_name) is None:
            raise ResourceNotFoundException("group", group_name)
        return await self.service_repo.list_by_group(group_name)

    async def update_service(self, service_id: str, changes: ServiceUpdate) -> ServiceEntity:
        """Apply a partial update to a service.

        The result must still satisfy the creation rules: a care service
        needs a code, and every referenced group, profile and requisite
        must exist.
        """
        service = await self.service_repo.get_by_id(service_id)
        if service is None:
            raise ResourceNotFoundException("service", service_id)
        fields = _changes(changes)

        name = fields.pop("name", None)
        if name is not None:
            name = name.strip()
            existing = await self.service_repo.get_by_name(name)
            if existing is not None and existing.id != service.id:
                raise ResourceAlreadyExistsException("service", name)
            service.name = name

        group_name = fields.pop("group_name", None)
        if group_name is not None:
            group = await self.group_repo.get_by_name(group_name)
            if group is None:
                raise ResourceNotFoundException("group", group_name)
            service.group = group

        profile_names = fields.pop("profile_names", None)
        if profile_names is not None:
            service.profile_names = [p.name for p in await self._load_profiles(profile_names)]

        requisite_names = fields.pop("requisite_names", None)
        if requisite_names is not None:
            service.requisites = await self._load_requisites(requisite_names)

        locations = fields.pop("locations", None)
        if locations is not None:
            service.locations = [Location(tower=loc.tower, floor=loc.floor) for loc in locations]

        service = dataclasses.replace(service, **fields)
        if service.category == ServiceCategory.CARE and service.code is None:
            raise ValidationException(
                f"code is required for category '{ServiceCategory.CARE.value}'",
                field="code",
            )
        return await self.service_repo.update(service)
