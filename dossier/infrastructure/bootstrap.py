"""Builds infrastructure-backed services outside a request (lifespan loop, scripts)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import dossier.infrastructure.persistence.database as database
from dossier.application.use_cases.expirations import RunExpirationSweepUseCase
from dossier.core.config import get_settings
from dossier.domain.exceptions import SqlNotConfiguredException
from dossier.infrastructure.external.email import EmailSenderFactory
from dossier.infrastructure.persistence.repositories import (
    FolderRepository,
    UserRepository,
    sql_expiration_log_scope,
)
from dossier.infrastructure.services import EmailNotificationService

if TYPE_CHECKING:
    import httpx

    from dossier.application.dtos.expiration import ExpirationSweepSummary
    from dossier.core.config import Settings


def build_notifier(
    settings: Settings | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> EmailNotificationService:
    s = settings or get_settings()
    return EmailNotificationService(
        EmailSenderFactory.create_sender(s, http_client=http_client),
        sender_email=s.email_sender,
        sender_name=s.email_sender_name,
        frontend_base_url=s.frontend_base_url,
    )


async def run_expiration_sweep(
    http_client: httpx.AsyncClient | None = None,
) -> ExpirationSweepSummary:
    """Run one sweep: users and folders are read in one session, logs written per user."""
    settings = get_settings()
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        raise SqlNotConfiguredException()
    async with database.AsyncSessionLocal() as session:
        use_case = RunExpirationSweepUseCase(
            user_repo=UserRepository(session),
            folder_repo=FolderRepository(session),
            log_scope=sql_expiration_log_scope,
            notifier=build_notifier(settings, http_client),
            alert_days=settings.expiration_alert_days,
        )
        return await use_case.run()
