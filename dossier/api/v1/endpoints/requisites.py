"""Requisite catalog API: thin routes delegating to RequisiteCatalogService."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Request, UploadFile

from dossier.api.v1.dependencies import (
    get_current_user,
    get_requisite_catalog_service,
    get_requisite_catalog_service_for_write,
    require_catalog_admin,
)
from dossier.application.dtos.catalog import RequisiteCreate, RequisiteUpdate
from dossier.application.use_cases.catalog import RequisiteCatalogService
from dossier.core.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from dossier.core.limiter import limit_upload, limit_writes
from dossier.domain.entities import UserEntity
from dossier.schemas.requisite import (
    RequisiteCreateRequest,
    RequisiteImportResponse,
    RequisiteListResponse,
    RequisiteResponse,
    RequisiteUpdateRequest,
)

router = APIRouter()


@router.post("", response_model=RequisiteResponse, status_code=201)
@limit_writes
async def create_requisite(
    request: Request,
    body: RequisiteCreateRequest,
    catalog: Annotated[
        RequisiteCatalogService, Depends(get_requisite_catalog_service_for_write)
    ],
    _: Annotated[UserEntity, Depends(require_catalog_admin)],
):
    """Create a requisite. Names are unique."""
    created = await catalog.create_requisite(RequisiteCreate(**body.model_dump()))
    return RequisiteResponse.model_validate(created)


@router.post("/import", response_model=RequisiteImportResponse, status_code=201)
@limit_upload
async def import_requisites(
    request: Request,
    catalog: Annotated[
        RequisiteCatalogService, Depends(get_requisite_catalog_service_for_write)
    ],
    _: Annotated[UserEntity, Depends(require_catalog_admin)],
    file: UploadFile = File(...),
):
    """Bulk-create requisites from an .xlsx workbook (first sheet, header row skipped)."""
    result = await catalog.import_workbook(await file.read())
    return RequisiteImportResponse(
        created=result.created, skipped_existing=result.skipped_existing
    )


@router.get("", response_model=RequisiteListResponse)
async def list_requisites(
    catalog: Annotated[RequisiteCatalogService, Depends(get_requisite_catalog_service)],
    _: Annotated[UserEntity, Depends(get_current_user)],
    page: int = DEFAULT_PAGE,
    size: int = DEFAULT_PAGE_SIZE,
    name: str | None = None,
):
    """List requisites, optionally filtered by name (page >= 1, 1 <= size <= 50)."""
    result = await catalog.list_requisites(page, size, name=name)
    return RequisiteListResponse(
        items=[RequisiteResponse.model_validate(r) for r in result.items],
        count=result.count,
    )


@router.get("/{requisite_id}", response_model=RequisiteResponse)
async def get_requisite(
    requisite_id: str,
    catalog: Annotated[RequisiteCatalogService, Depends(get_requisite_catalog_service)],
    _: Annotated[UserEntity, Depends(get_current_user)],
):
    return RequisiteResponse.model_validate(await catalog.get_requisite(requisite_id))


@router.patch("/{requisite_id}", response_model=RequisiteResponse)
@limit_writes
async def update_requisite(
    request: Request,
    requisite_id: str,
    body: RequisiteUpdateRequest,
    catalog: Annotated[
        RequisiteCatalogService, Depends(get_requisite_catalog_service_for_write)
    ],
    _: Annotated[UserEntity, Depends(require_catalog_admin)],
):
    """Partially update a requisite. The name cannot change."""
    changes = RequisiteUpdate(**body.model_dump(exclude_none=True))
    updated = await catalog.update_requisite(requisite_id, changes)
    return RequisiteResponse.model_validate(updated)
