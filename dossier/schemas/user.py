"""User API schemas."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from dossier.domain.enums import Role


class UserCreateRequest(BaseModel):
    """Request body for POST /users.

    COLLABORATOR is always added to roles. The password is generated and
    emailed to the new user.
    """

    first_name: str = Field(..., min_length=1, max_length=100)
    second_name: str | None = Field(default=None, max_length=100)
    surname: str = Field(..., min_length=1, max_length=100)
    second_surname: str | None = Field(default=None, max_length=100)
    email: EmailStr
    id_document_type: str = Field(..., min_length=1, max_length=16)
    id_document_number: str = Field(..., min_length=1, max_length=32)
    roles: list[Role] = Field(default_factory=list)
    birthdate: date | None = None
    sex: str | None = Field(default=None, max_length=16)
    group_name: str = Field(..., min_length=1)
    profile_name: str = Field(..., min_length=1)
    hiring_type: str = Field(..., min_length=1)
    service_names: list[str] = Field(..., min_length=1)


class UserUpdateRequest(BaseModel):
    """Request body for PATCH /users/{id}; omitted fields keep their value.

    Roles are changed through PATCH /users/{id_document_number}/role.
    """

    first_name: str | None = Field(default=None, min_length=1, max_length=100)
    second_name: str | None = Field(default=None, max_length=100)
    surname: str | None = Field(default=None, min_length=1, max_length=100)
    second_surname: str | None = Field(default=None, max_length=100)
    email: EmailStr | None = None
    birthdate: date | None = None
    sex: str | None = Field(default=None, max_length=16)
    is_active: bool | None = None


class UserRoleUpdateRequest(BaseModel):
    """Request body for PATCH /users/{id_document_number}/role."""

    role: Role


class IdDocumentSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    type: str
    number: str


class UserResponse(BaseModel):
    """User account (never includes the password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    first_name: str
    second_name: str | None = None
    surname: str
    second_surname: str | None = None
    full_name: str
    email: str
    id_document: IdDocumentSchema
    roles: list[Role]
    birthdate: date | None = None
    sex: str | None = None
    group_name: str | None = None
    profile_name: str | None = None
    hiring_type: str | None = None
    service_names: list[str]
    is_active: bool
    created_at: datetime | None = None


class UserListResponse(BaseModel):
    items: list[UserResponse]
    count: int
