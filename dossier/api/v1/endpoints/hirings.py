"""Hiring (contract type) API."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from dossier.api.v1.dependencies import (
    get_assignment_catalog_service,
    get_assignment_catalog_service_for_write,
    get_current_user,
    require_catalog_admin,
)
from dossier.application.dtos.catalog import HiringCreate, HiringUpdate
from dossier.application.use_cases.catalog import AssignmentCatalogService
from dossier.core.limiter import limit_writes
from dossier.domain.entities import UserEntity
from dossier.schemas.catalog import (
    HiringCreateRequest,
    HiringResponse,
    HiringUpdateRequest,
)

router = APIRouter()


@router.post("", response_model=HiringResponse, status_code=201)
@limit_writes
async def create_hiring(
    request: Request,
    body: HiringCreateRequest,
    catalog: Annotated[
        AssignmentCatalogService, Depends(get_assignment_catalog_service_for_write)
    ],
    _: Annotated[UserEntity, Depends(require_catalog_admin)],
):
    hiring = await catalog.create_hiring(
        HiringCreate(
            type=body.type,
            requisite_names=body.requisite_names,
            is_active=body.is_active,
        )
    )
    return HiringResponse.model_validate(hiring)


@router.get("", response_model=list[HiringResponse])
async def list_hirings(
    catalog: Annotated[AssignmentCatalogService, Depends(get_assignment_catalog_service)],
    _: Annotated[UserEntity, Depends(get_current_user)],
):
    return [HiringResponse.model_validate(h) for h in await catalog.list_hirings()]


@router.patch("/{hiring_id}", response_model=HiringResponse)
@limit_writes
async def update_hiring(
    request: Request,
    hiring_id: str,
    body: HiringUpdateRequest,
    catalog: Annotated[
        AssignmentCatalogService, Depends(get_assignment_catalog_service_for_write)
    ],
    _: Annotated[UserEntity, Depends(require_catalog_admin)],
):
    changes = HiringUpdate(**body.model_dump(exclude_none=True))
    return HiringResponse.model_validate(await catalog.update_hiring(hiring_id, changes))
