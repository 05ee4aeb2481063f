"""User onboarding, management and query dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from dossier.application.interfaces.services import INotificationService
from dossier.application.services import AssignmentResolver
from dossier.application.use_cases.users import (
    CreateUserUseCase,
    UserManagementService,
    UserQueryService,
)
from dossier.infrastructure.persistence.database import get_db_transactional
from dossier.infrastructure.persistence.repositories import (
    FolderRepository,
    GroupRepository,
    HiringRepository,
    ProfileRepository,
    ServiceRepository,
    UserRepository,
)
from dossier.infrastructure.security import BcryptPasswordHasher

from .auth import get_user_repo
from .services import get_notifier


async def get_create_user_use_case(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
    notifier: Annotated[INotificationService, Depends(get_notifier)],
) -> CreateUserUseCase:
    """User, folder and credentials email in one transaction.

    A failed credentials email rolls the whole request back.
    """
    resolver = AssignmentResolver(
        group_repo=GroupRepository(db),
        profile_repo=ProfileRepository(db),
        hiring_repo=HiringRepository(db),
        service_repo=ServiceRepository(db),
    )
    return CreateUserUseCase(
        user_repo=UserRepository(db),
        folder_repo=FolderRepository(db),
        resolver=resolver,
        password_hasher=BcryptPasswordHasher(),
        notifier=notifier,
    )


async def get_user_query_service(
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
) -> UserQueryService:
    return UserQueryService(user_repo)


async def get_user_management_service(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> UserManagementService:
    return UserManagementService(UserRepository(db))
