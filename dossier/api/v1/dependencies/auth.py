"""Bearer-token authentication and role guards."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from dossier.domain.access_policy import can_read_folder
from dossier.domain.entities import UserEntity
from dossier.domain.enums import Role
from dossier.domain.exceptions import AuthenticationException, AuthorizationException
from dossier.infrastructure.persistence.database import get_db
from dossier.infrastructure.persistence.repositories import UserRepository
from dossier.infrastructure.security.jwt import verify_token

logger = logging.getLogger(__name__)

_http_bearer = HTTPBearer(auto_error=False)


async def get_user_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UserRepository:
    """User repository for read operations (auth lookups, queries)."""
    return UserRepository(db)


async def get_current_user_optional(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
) -> UserEntity | None:
    """Return the active user named by the bearer token, or None.

    Roles come from the database, not from the token claims.
    """
    if not credentials:
        return None
    try:
        payload = verify_token(credentials.credentials)
    except ValueError as exc:
        logger.debug("Rejected bearer token: %s", exc)
        return None
    user = await user_repo.get_by_id(payload["sub"])
    if user is None or not user.is_active:
        return None
    return user


async def get_current_user(
    current_user: Annotated[UserEntity | None, Depends(get_current_user_optional)],
) -> UserEntity:
    """Return the authenticated user; 401 when the token is missing or invalid."""
    if current_user is None:
        raise AuthenticationException("Not authenticated")
    return current_user


def require_roles(*roles: Role):
    """Dependency factory: require an authenticated user holding one of roles."""
    allowed = frozenset(roles)

    async def _require(
        current_user: Annotated[UserEntity, Depends(get_current_user)],
    ) -> UserEntity:
        if not current_user.has_any_role(allowed):
            raise AuthorizationException(
                message=f"Requires one of roles: {', '.join(sorted(r.value for r in allowed))}"
            )
        return current_user

    return _require


require_reviewer = require_roles(*Role.reviewers())
require_catalog_admin = require_roles(Role.SUPERUSER, Role.MODERATOR)


async def require_folder_access(
    user_id: str,
    current_user: Annotated[UserEntity, Depends(get_current_user)],
) -> UserEntity:
    """Allow the folder owner and reviewers; user_id comes from the path."""
    if not can_read_folder(current_user.id, current_user.roles, user_id):
        raise AuthorizationException(
            message="You do not have permission to access these documents"
        )
    return current_user
