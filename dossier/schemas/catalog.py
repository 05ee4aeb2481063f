"""Group, profile, hiring and service API schemas."""

from pydantic import BaseModel, ConfigDict, Field

from dossier.domain.enums import ServiceCategory
from dossier.schemas.requisite import RequisiteResponse


class GroupCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    is_active: bool = True


class GroupUpdateRequest(BaseModel):
    """Request body for PATCH /groups/{id}; omitted fields keep their value."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    is_active: bool | None = None


class GroupResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    is_active: bool


class ProfileCreateRequest(BaseModel):
    """Request body for POST /profiles. Requisites are referenced by name."""

    name: str = Field(..., min_length=1, max_length=255)
    requisite_names: list[str] = Field(..., min_length=1)
    is_active: bool = True


class ProfileUpdateRequest(BaseModel):
    """Request body for PATCH /profiles/{id}. requisite_names replaces the set."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    requisite_names: list[str] | None = Field(default=None, min_length=1)
    is_active: bool | None = None


class ProfileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    requisites: list[RequisiteResponse]
    is_active: bool


class HiringCreateRequest(BaseModel):
    """Request body for POST /hirings. Requisites are referenced by name."""

    type: str = Field(..., min_length=1, max_length=255)
    requisite_names: list[str] = Field(..., min_length=1)
    is_active: bool = True


class HiringUpdateRequest(BaseModel):
    type: str | None = Field(default=None, min_length=1, max_length=255)
    requisite_names: list[str] | None = Field(default=None, min_length=1)
    is_active: bool | None = None


class HiringResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    type: str
    requisites: list[RequisiteResponse]
    is_active: bool


class LocationSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    tower: str = Field(..., min_length=1, max_length=64)
    floor: str = Field(..., min_length=1, max_length=64)


class ServiceCreateRequest(BaseModel):
    """Request body for POST /services.

    code is required when category is 'Asistencial' (checked by the use case).
    """

    name: str = Field(..., min_length=1, max_length=255)
    category: ServiceCategory
    cost_center: str = Field(..., min_length=1, max_length=64)
    qualification_distinctive_number: str = Field(..., min_length=1, max_length=64)
    group_name: str = Field(..., min_length=1)
    profile_names: list[str] = Field(..., min_length=1)
    requisite_names: list[str] = Field(..., min_length=1)
    locations: list[LocationSchema] = Field(default_factory=list)
    code: int | None = Field(default=None, ge=0)
    is_active: bool = True


class ServiceUpdateRequest(BaseModel):
    """Request body for PATCH /services/{id}.

    Name lists and locations replace the stored ones when given.
    """

    name: str | None = Field(default=None, min_length=1, max_length=255)
    category: ServiceCategory | None = None
    cost_center: str | None = Field(default=None, min_length=1, max_length=64)
    qualification_distinctive_number: str | None = Field(
        default=None, min_length=1, max_length=64
    )
    group_name: str | None = Field(default=None, min_length=1)
    profile_names: list[str] | None = Field(default=None, min_length=1)
    requisite_names: list[str] | None = Field(default=None, min_length=1)
    locations: list[LocationSchema] | None = None
    code: int | None = Field(default=None, ge=0)
    is_active: bool | None = None


class ServiceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    category: ServiceCategory
    group: GroupResponse
    cost_center: str
    qualification_distinctive_number: str
    code: int | None = None
    profile_names: list[str]
    requisites: list[RequisiteResponse]
    locations: list[LocationSchema]
    is_active: bool
