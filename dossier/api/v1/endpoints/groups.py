"""Group API."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from dossier.api.v1.dependencies import (
    get_assignment_catalog_service,
    get_assignment_catalog_service_for_write,
    get_current_user,
    require_catalog_admin,
)
from dossier.application.dtos.catalog import GroupUpdate
from dossier.application.use_cases.catalog import AssignmentCatalogService
from dossier.core.limiter import limit_writes
from dossier.domain.entities import UserEntity
from dossier.schemas.catalog import GroupCreateRequest, GroupResponse, GroupUpdateRequest

router = APIRouter()


@router.post("", response_model=GroupResponse, status_code=201)
@limit_writes
async def create_group(
    request: Request,
    body: GroupCreateRequest,
    catalog: Annotated[
        AssignmentCatalogService, Depends(get_assignment_catalog_service_for_write)
    ],
    _: Annotated[UserEntity, Depends(require_catalog_admin)],
):
    group = await catalog.create_group(body.name, is_active=body.is_active)
    return GroupResponse.model_validate(group)


@router.get("", response_model=list[GroupResponse])
async def list_groups(
    catalog: Annotated[AssignmentCatalogService, Depends(get_assignment_catalog_service)],
    _: Annotated[UserEntity, Depends(get_current_user)],
):
    return [GroupResponse.model_validate(g) for g in await catalog.list_groups()]


@router.patch("/{group_id}", response_model=GroupResponse)
@limit_writes
async def update_group(
    request: Request,
    group_id: str,
    body: GroupUpdateRequest,
    catalog: Annotated[
        AssignmentCatalogService, Depends(get_assignment_catalog_service_for_write)
    ],
    _: Annotated[UserEntity, Depends(require_catalog_admin)],
):
    changes = GroupUpdate(**body.model_dump(exclude_none=True))
    return GroupResponse.model_validate(await catalog.update_group(group_id, changes))
