"""Expiration log and sweep dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from dossier.application.interfaces.services import INotificationService
from dossier.application.use_cases.expirations import (
    ExpirationLogQueryService,
    RunExpirationSweepUseCase,
)
from dossier.core.config import get_settings
from dossier.infrastructure.persistence.database import get_db
from dossier.infrastructure.persistence.repositories import (
    ExpirationLogRepository,
    FolderRepository,
    UserRepository,
    sql_expiration_log_scope,
)

from .services import get_notifier


async def get_expiration_log_query_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ExpirationLogQueryService:
    return ExpirationLogQueryService(
        user_repo=UserRepository(db), log_repo=ExpirationLogRepository(db)
    )


async def get_run_expiration_sweep_use_case(
    db: Annotated[AsyncSession, Depends(get_db)],
    notifier: Annotated[INotificationService, Depends(get_notifier)],
) -> RunExpirationSweepUseCase:
    """Sweep reading users and folders from the request session.

    Each user's log is written in its own transaction (sql_expiration_log_scope).
    """
    return RunExpirationSweepUseCase(
        user_repo=UserRepository(db),
        folder_repo=FolderRepository(db),
        log_scope=sql_expiration_log_scope,
        notifier=notifier,
        alert_days=get_settings().expiration_alert_days,
    )
