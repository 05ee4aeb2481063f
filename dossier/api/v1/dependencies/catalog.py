"""Requisite and assignment catalog dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from dossier.application.use_cases.catalog import (
    AssignmentCatalogService,
    RequisiteCatalogService,
)
from dossier.infrastructure.persistence.database import get_db, get_db_transactional
from dossier.infrastructure.persistence.repositories import (
    GroupRepository,
    HiringRepository,
    ProfileRepository,
    RequisiteRepository,
    ServiceRepository,
)


def _assignment_catalog(db: AsyncSession) -> AssignmentCatalogService:
    return AssignmentCatalogService(
        requisite_repo=RequisiteRepository(db),
        group_repo=GroupRepository(db),
        profile_repo=ProfileRepository(db),
        hiring_repo=HiringRepository(db),
        service_repo=ServiceRepository(db),
    )


async def get_requisite_catalog_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> RequisiteCatalogService:
    """Requisite catalog for reads."""
    return RequisiteCatalogService(RequisiteRepository(db))


async def get_requisite_catalog_service_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> RequisiteCatalogService:
    """Requisite catalog for create/update/import (one transaction per request)."""
    return RequisiteCatalogService(RequisiteRepository(db))


async def get_assignment_catalog_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> AssignmentCatalogService:
    """Groups, profiles, hirings and services for reads."""
    return _assignment_catalog(db)


async def get_assignment_catalog_service_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> AssignmentCatalogService:
    """Groups, profiles, hirings and services for creates (transactional)."""
    return _assignment_catalog(db)
