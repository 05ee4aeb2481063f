"""Base repository: ORM lookups shared by the concrete repositories.

Repositories return domain entities; ORM rows never leave this package.
"""

from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from dossier.infrastructure.persistence.database import Base


class BaseRepository[ModelType: Base]:
    """Base repository with _get_row, _get_rows_by, _count and _add."""

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def _get_row(self, entity_id: str) -> ModelType | None:
        """Return a single row by primary key, or None."""
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def _get_row_by(self, column: Any, value: Any) -> ModelType | None:
        result = await self.db.execute(select(self.model).where(column == value))
        return result.scalars().first()

    async def _get_rows_in(self, column: Any, values: list[Any]) -> list[ModelType]:
        """Return rows whose column is in values (empty list short-circuits)."""
        if not values:
            return []
        result = await self.db.execute(select(self.model).where(column.in_(values)))
        return list(result.scalars().all())

    async def _count(self, stmt: Any) -> int:
        result = await self.db.execute(
            select(func.count()).select_from(stmt.order_by(None).subquery())
        )
        return int(result.scalar_one())

    async def _add(self, obj: ModelType) -> ModelType:
        """Persist a new row (flush only; the caller's transaction commits)."""
        self.db.add(obj)
        await self.db.flush()
        return obj
