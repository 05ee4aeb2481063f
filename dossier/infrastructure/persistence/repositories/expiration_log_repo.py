"""Expiration log repository and its per-user transaction scope."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

import dossier.infrastructure.persistence.database as database
from dossier.application.dtos.expiration import ExpirationLogEntry, ExpirationLogResult
from dossier.domain.exceptions import SqlNotConfiguredException
from dossier.infrastructure.persistence.models.expiration_log import ExpirationLog
from dossier.infrastructure.persistence.repositories.base import BaseRepository
from dossier.shared.utils.datetime import ensure_utc, utc_now


def _entry_to_json(entry: ExpirationLogEntry) -> dict[str, Any]:
    return {
        "document_name": entry.document_name,
        "id_attachment": entry.id_attachment,
        "expiration_date": entry.expiration_date.isoformat(),
        "days_to_expiration": entry.days_to_expiration,
    }


def _entry_from_json(data: dict[str, Any]) -> ExpirationLogEntry:
    return ExpirationLogEntry(
        document_name=data["document_name"],
        id_attachment=data["id_attachment"],
        expiration_date=ensure_utc(datetime.fromisoformat(data["expiration_date"])),
        days_to_expiration=int(data["days_to_expiration"]),
    )


def _to_result(row: ExpirationLog) -> ExpirationLogResult:
    return ExpirationLogResult(
        id=row.id,
        user_id=row.user_id,
        documents=[_entry_from_json(d) for d in row.documents or []],
        created_at=ensure_utc(row.created_at),
    )


class ExpirationLogRepository(BaseRepository[ExpirationLog]):
    """IExpirationLogRepository over SQLAlchemy (append-only)."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, ExpirationLog)

    async def create(
        self, user_id: str, entries: list[ExpirationLogEntry]
    ) -> ExpirationLogResult:
        now = utc_now()
        row = await self._add(
            ExpirationLog(
                user_id=user_id,
                documents=[_entry_to_json(e) for e in entries],
                created_at=now,
                updated_at=now,
            )
        )
        return _to_result(row)

    async def list_by_user(self, user_id: str) -> list[ExpirationLogResult]:
        result = await self.db.execute(
            select(ExpirationLog)
            .where(ExpirationLog.user_id == user_id)
            .order_by(ExpirationLog.created_at.desc())
        )
        return [_to_result(r) for r in result.scalars().all()]


@asynccontextmanager
async def sql_expiration_log_scope() -> AsyncIterator[ExpirationLogRepository]:
    """One session and transaction per user in the expiration sweep."""
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        raise SqlNotConfiguredException()
    async with database.AsyncSessionLocal() as session:
        async with session.begin():
            yield ExpirationLogRepository(session)
