"""Requisite API schemas."""

from pydantic import BaseModel, ConfigDict, Field

from dossier.core.constants import DESCRIPTION_MAX_LENGTH
from dossier.domain.enums import ValidityUnit


class RequisiteCreateRequest(BaseModel):
    """Request body for POST /requisites."""

    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    format: str | None = Field(default=None, max_length=64)
    is_validity_required: bool = False
    validity_value: int | None = Field(default=None, gt=0)
    validity_unit: ValidityUnit | None = None
    is_active: bool = True


class RequisiteUpdateRequest(BaseModel):
    """Request body for PATCH /requisites/{id}; omitted fields keep their value."""

    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    format: str | None = Field(default=None, max_length=64)
    is_validity_required: bool | None = None
    validity_value: int | None = Field(default=None, gt=0)
    validity_unit: ValidityUnit | None = None
    is_active: bool | None = None


class RequisiteResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str | None = None
    format: str | None = None
    is_validity_required: bool
    validity_value: int | None = None
    validity_unit: ValidityUnit | None = None
    is_active: bool


class RequisiteListResponse(BaseModel):
    """One page of requisites plus the total count."""

    items: list[RequisiteResponse]
    count: int


class RequisiteImportResponse(BaseModel):
    """Response for POST /requisites/import."""

    created: int
    skipped_existing: list[str] = Field(default_factory=list)
