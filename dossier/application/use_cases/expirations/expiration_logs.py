"""Expiration log queries."""

from __future__ import annotations

from typing import TYPE_CHECKING

from dossier.domain.exceptions import ResourceNotFoundException

if TYPE_CHECKING:
    from dossier.application.dtos.expiration import ExpirationLogResult
    from dossier.application.interfaces.repositories import (
        IExpirationLogRepository,
        IUserRepository,
    )


class ExpirationLogQueryService:
    def __init__(
        self, user_repo: IUserRepository, log_repo: IExpirationLogRepository
    ) -> None:
        self.user_repo = user_repo
        self.log_repo = log_repo

    async def list_by_user(self, user_id: str) -> list[ExpirationLogResult]:
        """Return the user's expiration logs, newest first."""
        if await self.user_repo.get_by_id(user_id) is None:
            raise ResourceNotFoundException("user", user_id)
        return await self.log_repo.list_by_user(user_id)
