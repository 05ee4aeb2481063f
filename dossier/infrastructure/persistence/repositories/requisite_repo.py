"""Requisite repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from dossier.application.dtos.common import Page, PageRequest
from dossier.domain.entities import RequisiteEntity
from dossier.domain.enums import ValidityUnit
from dossier.domain.exceptions import ResourceNotFoundException
from dossier.infrastructure.persistence.models.catalog import Requisite
from dossier.infrastructure.persistence.repositories.base import BaseRepository
from dossier.shared.utils.datetime import utc_now


def to_requisite_entity(row: Requisite) -> RequisiteEntity:
    return RequisiteEntity(
        id=row.id,
        name=row.name,
        description=row.description,
        format=row.format,
        is_validity_required=row.is_validity_required,
        validity_value=row.validity_value,
        validity_unit=ValidityUnit(row.validity_unit) if row.validity_unit else None,
        is_active=row.is_active,
    )


class RequisiteRepository(BaseRepository[Requisite]):
    """IRequisiteRepository over SQLAlchemy."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Requisite)

    async def get_by_id(self, requisite_id: str) -> RequisiteEntity | None:
        row = await self._get_row(requisite_id)
        return to_requisite_entity(row) if row else None

    async def get_by_name(self, name: str) -> RequisiteEntity | None:
        row = await self._get_row_by(Requisite.name, name)
        return to_requisite_entity(row) if row else None

    async def get_rows_by_names(self, names: list[str]) -> list[Requisite]:
        """ORM rows for association with profiles, hirings and services."""
        return await self._get_rows_in(Requisite.name, names)

    async def get_by_names(self, names: list[str]) -> list[RequisiteEntity]:
        return [to_requisite_entity(r) for r in await self.get_rows_by_names(names)]

    async def list_page(
        self, page: PageRequest, name: str | None = None
    ) -> Page[RequisiteEntity]:
        stmt = select(Requisite)
        if name:
            stmt = stmt.where(Requisite.name.icontains(name, autoescape=True))
        count = await self._count(stmt)
        result = await self.db.execute(
            stmt.order_by(Requisite.name).offset(page.offset).limit(page.size)
        )
        items = [to_requisite_entity(r) for r in result.scalars().all()]
        return Page(items=items, count=count)

    async def create(self, requisite: RequisiteEntity) -> RequisiteEntity:
        now = utc_now()
        row = Requisite(
            id=requisite.id,
            name=requisite.name,
            description=requisite.description,
            format=requisite.format,
            is_validity_required=requisite.is_validity_required,
            validity_value=requisite.validity_value,
            validity_unit=requisite.validity_unit.value if requisite.validity_unit else None,
            is_active=requisite.is_active,
            created_at=now,
            updated_at=now,
        )
        await self._add(row)
        return to_requisite_entity(row)

    async def update(self, requisite: RequisiteEntity) -> RequisiteEntity:
        row = await self._get_row(requisite.id)
        if row is None:
            raise ResourceNotFoundException("requisite", requisite.id)
        row.description = requisite.description
        row.format = requisite.format
        row.is_validity_required = requisite.is_validity_required
        row.validity_value = requisite.validity_value
        row.validity_unit = requisite.validity_unit.value if requisite.validity_unit else None
        row.is_active = requisite.is_active
        row.updated_at = utc_now()
        await self.db.flush()
        return to_requisite_entity(row)
