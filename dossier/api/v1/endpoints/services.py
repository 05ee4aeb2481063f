"""Service API: services belong to a group and admit a set of profiles."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from dossier.api.v1.dependencies import (
    get_assignment_catalog_service,
    get_assignment_catalog_service_for_write,
    get_current_user,
    require_catalog_admin,
)
from dossier.application.dtos.catalog import LocationData, ServiceCreate, ServiceUpdate
from dossier.application.use_cases.catalog import AssignmentCatalogService
from dossier.core.limiter import limit_writes
from dossier.domain.entities import UserEntity
from dossier.schemas.catalog import (
    ServiceCreateRequest,
    ServiceResponse,
    ServiceUpdateRequest,
)

router = APIRouter()


@router.post("", response_model=ServiceResponse, status_code=201)
@limit_writes
async def create_service(
    request: Request,
    body: ServiceCreateRequest,
    catalog: Annotated[
        AssignmentCatalogService, Depends(get_assignment_catalog_service_for_write)
    ],
    _: Annotated[UserEntity, Depends(require_catalog_admin)],
):
    """Create a service. Care services ('Asistencial') need a code."""
    data = ServiceCreate(
        name=body.name,
        category=body.category,
        cost_center=body.cost_center,
        qualification_distinctive_number=body.qualification_distinctive_number,
        group_name=body.group_name,
        profile_names=body.profile_names,
        requisite_names=body.requisite_names,
        locations=[LocationData(tower=loc.tower, floor=loc.floor) for loc in body.locations],
        code=body.code,
        is_active=body.is_active,
    )
    return ServiceResponse.model_validate(await catalog.create_service(data))


@router.get("", response_model=list[ServiceResponse])
async def list_services(
    catalog: Annotated[AssignmentCatalogService, Depends(get_assignment_catalog_service)],
    _: Annotated[UserEntity, Depends(get_current_user)],
):
    return [ServiceResponse.model_validate(s) for s in await catalog.list_services()]


@router.get("/group/{group_name}", response_model=list[ServiceResponse])
async def list_services_by_group(
    group_name: str,
    catalog: Annotated[AssignmentCatalogService, Depends(get_assignment_catalog_service)],
    _: Annotated[UserEntity, Depends(get_current_user)],
):
    """List the services of one group (404 when the group does not exist)."""
    services = await catalog.list_services_by_group(group_name)
    return [ServiceResponse.model_validate(s) for s in services]


@router.patch("/{service_id}", response_model=ServiceResponse)
@limit_writes
async def update_service(
    request: Request,
    service_id: str,
    body: ServiceUpdateRequest,
    catalog: Annotated[
        AssignmentCatalogService, Depends(get_assignment_catalog_service_for_write)
    ],
    _: Annotated[UserEntity, Depends(require_catalog_admin)],
):
    """Partially update a service. Lists and locations replace the stored ones."""
    fields = body.model_dump(exclude_none=True, exclude={"locations"})
    if body.locations is not None:
        fields["locations"] = [
            LocationData(tower=loc.tower, floor=loc.floor) for loc in body.locations
        ]
    updated = await catalog.update_service(service_id, ServiceUpdate(**fields))
    return ServiceResponse.model_validate(updated)
