"""User API: onboarding, account management and queries."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from dossier.api.v1.dependencies import (
    get_create_user_use_case,
    get_current_user,
    get_user_management_service,
    get_user_query_service,
    require_reviewer,
    require_roles,
)
from dossier.application.dtos.user import UserCreate, UserFilters, UserUpdate
from dossier.application.use_cases.users import (
    CreateUserUseCase,
    UserManagementService,
    UserQueryService,
)
from dossier.core.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from dossier.core.limiter import limit_writes
from dossier.domain.entities import UserEntity
from dossier.domain.enums import Role
from dossier.schemas.user import (
    UserCreateRequest,
    UserListResponse,
    UserResponse,
    UserRoleUpdateRequest,
    UserUpdateRequest,
)

router = APIRouter()


@router.post("", response_model=UserResponse, status_code=201)
@limit_writes
async def create_user(
    request: Request,
    body: UserCreateRequest,
    use_case: Annotated[CreateUserUseCase, Depends(get_create_user_use_case)],
    current_user: Annotated[UserEntity, Depends(get_current_user)],
):
    """Create a user with their folder and email the generated credentials.

    Which roles the caller may grant is decided by the user creation policy.
    """
    data = UserCreate(**body.model_dump())
    created = await use_case.execute(current_user, data)
    return UserResponse.model_validate(created)


@router.get("/me", response_model=UserResponse)
async def get_me(current_user: Annotated[UserEntity, Depends(get_current_user)]):
    """Return the authenticated user."""
    return UserResponse.model_validate(current_user)


@router.get("", response_model=UserListResponse)
async def list_users(
    queries: Annotated[UserQueryService, Depends(get_user_query_service)],
    _: Annotated[UserEntity, Depends(require_reviewer)],
    page: int = DEFAULT_PAGE,
    size: int = DEFAULT_PAGE_SIZE,
    name: str | None = None,
    email: str | None = None,
    id_document_number: str | None = None,
    role: Role | None = None,
    is_active: bool | None = None,
):
    """List users (paginated, optional case-insensitive filters)."""
    filters = UserFilters(
        name=name,
        email=email,
        id_document_number=id_document_number,
        role=role,
        is_active=is_active,
    )
    result = await queries.list_users(page, size, filters)
    return UserListResponse(
        items=[UserResponse.model_validate(u) for u in result.items],
        count=result.count,
    )


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    queries: Annotated[UserQueryService, Depends(get_user_query_service)],
    _: Annotated[UserEntity, Depends(require_reviewer)],
):
    return UserResponse.model_validate(await queries.get_user(user_id))


@router.patch("/{id_document_number}/role", response_model=UserResponse)
@limit_writes
async def change_user_role(
    request: Request,
    id_document_number: str,
    body: UserRoleUpdateRequest,
    management: Annotated[UserManagementService, Depends(get_user_management_service)],
    current_user: Annotated[
        UserEntity, Depends(require_roles(Role.SUPERUSER, Role.MODERATOR))
    ],
):
    """Grant a role to the user with this identity document number.

    Only MODERATOR and COORDINATOR can be granted here. A superuser may
    promote coordinators and collaborators to moderator; superusers and
    moderators may promote collaborators to coordinator.
    """
    updated = await management.change_role(current_user, id_document_number, body.role)
    return UserResponse.model_validate(updated)


@router.patch("/{user_id}", response_model=UserResponse)
@limit_writes
async def update_user(
    request: Request,
    user_id: str,
    body: UserUpdateRequest,
    management: Annotated[UserManagementService, Depends(get_user_management_service)],
    current_user: Annotated[
        UserEntity, Depends(require_roles(Role.SUPERUSER, Role.MODERATOR))
    ],
):
    """Partially update an account; is_active=false deactivates it."""
    changes = UserUpdate(**body.model_dump(exclude_none=True))
    updated = await management.update_user(current_user, user_id, changes)
    return UserResponse.model_validate(updated)
