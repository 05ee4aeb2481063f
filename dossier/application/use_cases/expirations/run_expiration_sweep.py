"""Weekly expiration sweep: log and email every user's dated documents."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING

from dossier.application.dtos.expiration import (
    ExpirationLogEntry,
    ExpirationSweepSummary,
)
from dossier.core.constants import NO_ATTACHMENT_PLACEHOLDER
from dossier.domain.expiration import days_to_expiration, expiration_message
from dossier.shared.utils.datetime import utc_now

if TYPE_CHECKING:
    from dossier.application.interfaces.repositories import (
        ExpirationLogScope,
        IFolderRepository,
        IUserRepository,
    )
    from dossier.application.interfaces.services import INotificationService
    from dossier.domain.entities import FolderEntity, UserEntity

logger = logging.getLogger(__name__)


def build_log_entries(folder: FolderEntity, now: datetime) -> list[ExpirationLogEntry]:
    """One entry per dated document, days clamped at 0 once expired."""
    entries: list[ExpirationLogEntry] = []
    for document in folder.dated_documents():
        current = document.current_attachment
        entries.append(
            ExpirationLogEntry(
                document_name=document.name,
                id_attachment=current.filename if current else NO_ATTACHMENT_PLACEHOLDER,
                expiration_date=document.expiration_date,
                days_to_expiration=days_to_expiration(document.expiration_date, now),
            )
        )
    return entries


def build_digest_messages(
    folder: FolderEntity, now: datetime, alert_days: int
) -> list[str]:
    """One status line per document, dated or not."""
    return [
        expiration_message(d.name, d.expiration_date, now, alert_days)
        for d in folder.documents
    ]


class RunExpirationSweepUseCase:
    """Scans every active user's folder and records an expiration log per user.

    A user's log row and digest email succeed or fail together: the log is
    written inside a transaction from log_scope and the email is sent before
    it commits. One user's failure is logged and does not stop the sweep.
    Users without documents are skipped; users without dated documents get
    neither a log nor an email.
    """

    def __init__(
        self,
        user_repo: IUserRepository,
        folder_repo: IFolderRepository,
        log_scope: ExpirationLogScope,
        notifier: INotificationService,
        alert_days: int,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._user_repo = user_repo
        self._folder_repo = folder_repo
        self._log_scope = log_scope
        self._notifier = notifier
        self._alert_days = alert_days
        self._clock = clock

    async def _process_user(self, user: UserEntity, now: datetime) -> str:
        """Return 'skipped', 'undated' or 'logged'."""
        folder = await self._folder_repo.get_folder(user.id)
        if folder is None or not folder.documents:
            logger.warning("User %s has no documents; skipping", user.id)
            return "skipped"
        entries = build_log_entries(folder, now)
        if not entries:
            return "undated"
        messages = build_digest_messages(folder, now, self._alert_days)
        async with self._log_scope() as logs:
            await logs.create(user.id, entries)
            await self._notifier.send_expiration_digest(
                user.email, user.full_name, messages
            )
        return "logged"

    async def run(self) -> ExpirationSweepSummary:
        now = self._clock()
        users = await self._user_repo.list_active()
        logger.info("Expiration sweep started: %d active user(s)", len(users))

        skipped = 0
        logged = 0
        failed: list[str] = []
        for user in users:
            try:
                outcome = await self._process_user(user, now)
            except Exception:
                logger.exception("Expiration sweep failed for user %s", user.id)
                failed.append(user.id)
                continue
            if outcome == "skipped":
                skipped += 1
            elif outcome == "logged":
                logged += 1

        summary = ExpirationSweepSummary(
            users_scanned=len(users),
            users_skipped=skipped,
            logs_written=logged,
            emails_sent=logged,
            failed_user_ids=failed,
        )
        logger.info(
            "Expiration sweep finished: scanned=%d skipped=%d logged=%d failed=%d",
            summary.users_scanned,
            summary.users_skipped,
            summary.logs_written,
            summary.users_failed,
        )
        return summary
