"""Repositories for groups, profiles, hirings and services."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from dossier.domain.entities import (
    GroupEntity,
    HiringEntity,
    Location,
    ProfileEntity,
    RequisiteEntity,
    ServiceEntity,
)
from dossier.domain.enums import ServiceCategory
from dossier.domain.exceptions import ResourceNotFoundException
from dossier.infrastructure.persistence.models.catalog import (
    Group,
    Hiring,
    Profile,
    Requisite,
    Service,
    ServiceLocation,
)
from dossier.infrastructure.persistence.repositories.base import BaseRepository
from dossier.infrastructure.persistence.repositories.requisite_repo import (
    to_requisite_entity,
)
from dossier.shared.utils.datetime import utc_now

if TYPE_CHECKING:
    from dossier.application.dtos.catalog import ServiceCreate


def _to_group(row: Group) -> GroupEntity:
    return GroupEntity(id=row.id, name=row.name, is_active=row.is_active)


def _to_profile(row: Profile) -> ProfileEntity:
    return ProfileEntity(
        id=row.id,
        name=row.name,
        requisites=[to_requisite_entity(r) for r in row.requisites],
        is_active=row.is_active,
    )


def _to_hiring(row: Hiring) -> HiringEntity:
    return HiringEntity(
        id=row.id,
        type=row.type,
        requisites=[to_requisite_entity(r) for r in row.requisites],
        is_active=row.is_active,
    )


def _to_service(row: Service) -> ServiceEntity:
    return ServiceEntity(
        id=row.id,
        name=row.name,
        category=ServiceCategory(row.category),
        group=_to_group(row.group),
        cost_center=row.cost_center or "",
        qualification_distinctive_number=row.qualification_distinctive_number or "",
        code=row.code,
        profile_names=[p.name for p in row.profiles],
        requisites=[to_requisite_entity(r) for r in row.requisites],
        locations=[Location(tower=loc.tower, floor=loc.floor) for loc in row.locations],
        is_active=row.is_active,
    )


async def _requisite_rows(
    db: AsyncSession, requisites: list[RequisiteEntity]
) -> list[Requisite]:
    ids = list(dict.fromkeys(r.id for r in requisites))
    if not ids:
        return []
    result = await db.execute(select(Requisite).where(Requisite.id.in_(ids)))
    return list(result.scalars().all())


class GroupRepository(BaseRepository[Group]):
    """IGroupRepository over SQLAlchemy."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Group)

    async def get_by_id(self, group_id: str) -> GroupEntity | None:
        row = await self._get_row(group_id)
        return _to_group(row) if row else None

    async def get_by_name(self, name: str) -> GroupEntity | None:
        row = await self._get_row_by(Group.name, name)
        return _to_group(row) if row else None

    async def list_all(self) -> list[GroupEntity]:
        result = await self.db.execute(select(Group).order_by(Group.name))
        return [_to_group(r) for r in result.scalars().all()]

    async def create(self, name: str, is_active: bool = True) -> GroupEntity:
        now = utc_now()
        row = await self._add(
            Group(name=name, is_active=is_active, created_at=now, updated_at=now)
        )
        return _to_group(row)

    async def update(self, group: GroupEntity) -> GroupEntity:
        row = await self._get_row(group.id)
        if row is None:
            raise ResourceNotFoundException("group", group.id)
        row.name = group.name
        row.is_active = group.is_active
        row.updated_at = utc_now()
        await self.db.flush()
        return _to_group(row)


class ProfileRepository(BaseRepository[Profile]):
    """IProfileRepository over SQLAlchemy."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Profile)

    async def get_by_id(self, profile_id: str) -> ProfileEntity | None:
        row = await self._get_row(profile_id)
        return _to_profile(row) if row else None

    async def get_by_name(self, name: str) -> ProfileEntity | None:
        row = await self._get_row_by(Profile.name, name)
        return _to_profile(row) if row else None

    async def get_by_names(self, names: list[str]) -> list[ProfileEntity]:
        return [_to_profile(r) for r in await self._get_rows_in(Profile.name, names)]

    async def list_all(self) -> list[ProfileEntity]:
        result = await self.db.execute(select(Profile).order_by(Profile.name))
        return [_to_profile(r) for r in result.scalars().all()]

    async def create(
        self, name: str, requisites: list[RequisiteEntity], is_active: bool = True
    ) -> ProfileEntity:
        now = utc_now()
        row = Profile(name=name, is_active=is_active, created_at=now, updated_at=now)
        row.requisites = await _requisite_rows(self.db, requisites)
        await self._add(row)
        return _to_profile(row)

    async def update(self, profile: ProfileEntity) -> ProfileEntity:
        row = await self._get_row(profile.id)
        if row is None:
            raise ResourceNotFoundException("profile", profile.id)
        row.name = profile.name
        row.is_active = profile.is_active
        row.requisites = await _requisite_rows(self.db, profile.requisites)
        row.updated_at = utc_now()
        await self.db.flush()
        return _to_profile(row)


class HiringRepository(BaseRepository[Hiring]):
    """IHiringRepository over SQLAlchemy."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Hiring)

    async def get_by_id(self, hiring_id: str) -> HiringEntity | None:
        row = await self._get_row(hiring_id)
        return _to_hiring(row) if row else None

    async def get_by_type(self, hiring_type: str) -> HiringEntity | None:
        row = await self._get_row_by(Hiring.type, hiring_type)
        return _to_hiring(row) if row else None

    async def list_all(self) -> list[HiringEntity]:
        result = await self.db.execute(select(Hiring).order_by(Hiring.type))
        return [_to_hiring(r) for r in result.scalars().all()]

    async def create(
        self, hiring_type: str, requisites: list[RequisiteEntity], is_active: bool = True
    ) -> HiringEntity:
        now = utc_now()
        row = Hiring(type=hiring_type, is_active=is_active, created_at=now, updated_at=now)
        row.requisites = await _requisite_rows(self.db, requisites)
        await self._add(row)
        return _to_hiring(row)

    async def update(self, hiring: HiringEntity) -> HiringEntity:
        row = await self._get_row(hiring.id)
        if row is None:
            raise ResourceNotFoundException("hiring", hiring.id)
        row.type = hiring.type
        row.is_active = hiring.is_active
        row.requisites = await _requisite_rows(self.db, hiring.requisites)
        row.updated_at = utc_now()
        await self.db.flush()
        return _to_hiring(row)


class ServiceRepository(BaseRepository[Service]):
    """IServiceRepository over SQLAlchemy."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Service)

    async def get_by_id(self, service_id: str) -> ServiceEntity | None:
        row = await self._get_row(service_id)
        return _to_service(row) if row else None

    async def get_by_name(self, name: str) -> ServiceEntity | None:
        row = await self._get_row_by(Service.name, name)
        return _to_service(row) if row else None

    async def get_by_names(self, names: list[str]) -> list[ServiceEntity]:
        return [_to_service(r) for r in await self._get_rows_in(Service.name, names)]

    async def list_all(self) -> list[ServiceEntity]:
        result = await self.db.execute(select(Service).order_by(Service.name))
        return [_to_service(r) for r in result.scalars().unique().all()]

    async def list_by_group(self, group_name: str) -> list[ServiceEntity]:
        stmt = (
            select(Service)
            .join(Group, Service.group_id == Group.id)
            .where(Group.name == group_name)
            .order_by(Service.name)
        )
        result = await self.db.execute(stmt)
        return [_to_service(r) for r in result.scalars().unique().all()]

    async def create(
        self,
        data: ServiceCreate,
        group: GroupEntity,
        profiles: list[ProfileEntity],
        requisites: list[RequisiteEntity],
    ) -> ServiceEntity:
        group_row = await self.db.get(Group, group.id)
        if group_row is None:
            raise ResourceNotFoundException("group", group.name)
        profile_ids = [p.id for p in profiles]
        profile_rows: list[Profile] = []
        if profile_ids:
            result = await self.db.execute(select(Profile).where(Profile.id.in_(profile_ids)))
            profile_rows = list(result.scalars().all())
        now = utc_now()
        row = Service(
            name=data.name,
            category=data.category.value,
            code=data.code,
            cost_center=data.cost_center,
            qualification_distinctive_number=data.qualification_distinctive_number,
            group_id=group_row.id,
            is_active=data.is_active,
            created_at=now,
            updated_at=now,
        )
        row.group = group_row
        row.profiles = profile_rows
        row.requisites = await _requisite_rows(self.db, requisites)
        row.locations = [
            ServiceLocation(tower=loc.tower, floor=loc.floor) for loc in data.locations
        ]
        await self._add(row)
        return _to_service(row)

    async def update(self, service: ServiceEntity) -> ServiceEntity:
        row = await self._get_row(service.id)
        if row is None:
            raise ResourceNotFoundException("service", service.id)
        group_row = await self.db.get(Group, service.group.id)
        if group_row is None:
            raise ResourceNotFoundException("group", service.group.name)
        profile_rows: list[Profile] = []
        if service.profile_names:
            result = await self.db.execute(
                select(Profile).where(Profile.name.in_(service.profile_names))
            )
            profile_rows = list(result.scalars().all())
        row.name = service.name
        row.category = service.category.value
        row.code = service.code
        row.cost_center = service.cost_center
        row.qualification_distinctive_number = service.qualification_distinctive_number
        row.is_active = service.is_active
        row.group_id = group_row.id
        row.group = group_row
        row.profiles = profile_rows
        row.requisites = await _requisite_rows(self.db, service.requisites)
        row.locations = [
            ServiceLocation(tower=loc.tower, floor=loc.floor) for loc in service.locations
        ]
        row.updated_at = utc_now()
        await self.db.flush()
        return _to_service(row)
