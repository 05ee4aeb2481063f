"""Profile API: profiles reference requisites by name."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from dossier.api.v1.dependencies import (
    get_assignment_catalog_service,
    get_assignment_catalog_service_for_write,
    get_current_user,
    require_catalog_admin,
)
from dossier.application.dtos.catalog import ProfileCreate, ProfileUpdate
from dossier.application.use_cases.catalog import AssignmentCatalogService
from dossier.core.limiter import limit_writes
from dossier.domain.entities import UserEntity
from dossier.schemas.catalog import (
    ProfileCreateRequest,
    ProfileResponse,
    ProfileUpdateRequest,
)

router = APIRouter()


@router.post("", response_model=ProfileResponse, status_code=201)
@limit_writes
async def create_profile(
    request: Request,
    body: ProfileCreateRequest,
    catalog: Annotated[
        AssignmentCatalogService, Depends(get_assignment_catalog_service_for_write)
    ],
    _: Annotated[UserEntity, Depends(require_catalog_admin)],
):
    """Create a profile; every requisite name must exist."""
    profile = await catalog.create_profile(
        ProfileCreate(
            name=body.name,
            requisite_names=body.requisite_names,
            is_active=body.is_active,
        )
    )
    return ProfileResponse.model_validate(profile)


@router.get("", response_model=list[ProfileResponse])
async def list_profiles(
    catalog: Annotated[AssignmentCatalogService, Depends(get_assignment_catalog_service)],
    _: Annotated[UserEntity, Depends(get_current_user)],
):
    return [ProfileResponse.model_validate(p) for p in await catalog.list_profiles()]


@router.patch("/{profile_id}", response_model=ProfileResponse)
@limit_writes
async def update_profile(
    request: Request,
    profile_id: str,
    body: ProfileUpdateRequest,
    catalog: Annotated[
        AssignmentCatalogService, Depends(get_assignment_catalog_service_for_write)
    ],
    _: Annotated[UserEntity, Depends(require_catalog_admin)],
):
    """Partially update a profile. requisite_names replaces the whole set.

    Folders created from this profile are not changed.
    """
    changes = ProfileUpdate(**body.model_dump(exclude_none=True))
    return ProfileResponse.model_validate(await catalog.update_profile(profile_id, changes))
