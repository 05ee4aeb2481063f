"""User queries: get by id, paginated listing."""

from __future__ import annotations

from typing import TYPE_CHECKING

from dossier.application.dtos.common import Page, PageRequest
from dossier.domain.exceptions import ResourceNotFoundException

if TYPE_CHECKING:
    from dossier.application.dtos.user import UserFilters
    from dossier.application.interfaces.repositories import IUserRepository
    from dossier.domain.entities import UserEntity


class UserQueryService:
    """Read-only access to user accounts."""

    def __init__(self, user_repo: IUserRepository) -> None:
        self.user_repo = user_repo

    async def get_user(self, user_id: str) -> UserEntity:
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise ResourceNotFoundException("user", user_id)
        return user

    async def list_users(
        self, page: int, size: int, filters: UserFilters | None = None
    ) -> Page[UserEntity]:
        return await self.user_repo.list_page(PageRequest(page, size), filters)
