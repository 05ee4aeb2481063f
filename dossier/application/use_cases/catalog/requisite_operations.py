"""Requisite catalog: create, update, list, and bulk import from Excel."""

from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING

from dossier.application.dtos.catalog import (
    RequisiteCreate,
    RequisiteImportResult,
    RequisiteUpdate,
)
from dossier.application.dtos.common import Page, PageRequest
from dossier.application.services.requisite_workbook import read_requisite_workbook
from dossier.domain.entities import RequisiteEntity
from dossier.domain.exceptions import (
    ResourceAlreadyExistsException,
    ResourceNotFoundException,
)
from dossier.shared.utils.generators import generate_cuid

if TYPE_CHECKING:
    from dossier.application.interfaces.repositories import IRequisiteRepository

logger = logging.getLogger(__name__)


class RequisiteCatalogService:
    """Manages the requisite catalog. Names are unique."""

    def __init__(self, requisite_repo: IRequisiteRepository) -> None:
        self.requisite_repo = requisite_repo

    async def create_requisite(self, data: RequisiteCreate) -> RequisiteEntity:
        """Create a requisite.

        Raises:
            ResourceAlreadyExistsException: Name already taken.
            ValidationException: Validity required without value and unit.
        """
        name = data.name.strip()
        if await self.requisite_repo.get_by_name(name) is not None:
            raise ResourceAlreadyExistsException("requisite", name)
        requisite = RequisiteEntity(
            id=generate_cuid(),
            name=name,
            description=data.description,
            format=data.format,
            is_validity_required=data.is_validity_required,
            validity_value=data.validity_value,
            validity_unit=data.validity_unit,
            is_active=data.is_active,
        )
        return await self.requisite_repo.create(requisite)

    async def get_requisite(self, requisite_id: str) -> RequisiteEntity:
        requisite = await self.requisite_repo.get_by_id(requisite_id)
        if requisite is None:
            raise ResourceNotFoundException("requisite", requisite_id)
        return requisite

    async def list_requisites(
        self, page: int, size: int, name: str | None = None
    ) -> Page[RequisiteEntity]:
        """Return one page of requisites (page >= 1, 1 <= size <= 50)."""
        return await self.requisite_repo.list_page(PageRequest(page, size), name=name)

    async def update_requisite(
        self, requisite_id: str, changes: RequisiteUpdate
    ) -> RequisiteEntity:
        """Apply a partial update; the result is re-validated before saving."""
        current = await self.get_requisite(requisite_id)
        updates = {
            f.name: getattr(changes, f.name)
            for f in dataclasses.fields(changes)
            if getattr(changes, f.name) is not None
        }
        updated = dataclasses.replace(current, **updates)
        if not updated.is_validity_required:
            updated.validity_value = None
            updated.validity_unit = None
        return await self.requisite_repo.update(updated)

    async def import_workbook(self, content: bytes) -> RequisiteImportResult:
        """Create every requisite in the workbook whose name is not taken yet."""
        rows = read_requisite_workbook(content)
        created = 0
        skipped: list[str] = []
        for row in rows:
            name = row.name.strip()
            if await self.requisite_repo.get_by_name(name) is not None:
                skipped.append(name)
                continue
            await self.create_requisite(row)
            created += 1
        logger.info(
            "Imported %d requisite(s) from workbook; %d already existed",
            created,
            len(skipped),
        )
        return RequisiteImportResult(created=created, skipped_existing=skipped)
