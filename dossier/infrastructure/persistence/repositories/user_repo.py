"""User repository."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Select, String, cast, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from dossier.application.dtos.common import Page, PageRequest
from dossier.domain.entities import IdDocument, UserEntity
from dossier.domain.enums import Role
from dossier.domain.exceptions import ResourceNotFoundException
from dossier.infrastructure.persistence.models.user import User
from dossier.infrastructure.persistence.repositories.base import BaseRepository
from dossier.shared.utils.datetime import ensure_utc, utc_now

if TYPE_CHECKING:
    from dossier.application.dtos.user import UserFilters


def _to_entity(row: User) -> UserEntity:
    return UserEntity(
        id=row.id,
        first_name=row.first_name,
        second_name=row.second_name,
        surname=row.surname,
        second_surname=row.second_surname,
        email=row.email,
        id_document=IdDocument(type=row.id_document_type, number=row.id_document_number),
        roles=[Role(r) for r in row.roles or []],
        birthdate=row.birthdate,
        sex=row.sex,
        group_name=row.group_name,
        profile_name=row.profile_name,
        hiring_type=row.hiring_type,
        service_names=list(row.service_names or []),
        is_active=row.is_active,
        created_at=ensure_utc(row.created_at),
    )


def build_user_query(filters: UserFilters | None = None) -> Select[tuple[User]]:
    """Select users matching filters.

    Text filters are case-insensitive substring matches; LIKE wildcards in
    the input are matched literally.
    """
    stmt = select(User)
    if filters is None:
        return stmt
    if filters.name:
        stmt = stmt.where(
            or_(
                User.first_name.icontains(filters.name, autoescape=True),
                User.second_name.icontains(filters.name, autoescape=True),
                User.surname.icontains(filters.name, autoescape=True),
                User.second_surname.icontains(filters.name, autoescape=True),
            )
        )
    if filters.email:
        stmt = stmt.where(User.email.icontains(filters.email, autoescape=True))
    if filters.id_document_number:
        stmt = stmt.where(
            User.id_document_number.icontains(filters.id_document_number, autoescape=True)
        )
    if filters.role is not None:
        # roles is a JSON array of strings; match the quoted value
        stmt = stmt.where(
            cast(User.roles, String).contains(f'"{filters.role.value}"', autoescape=True)
        )
    if filters.is_active is not None:
        stmt = stmt.where(User.is_active == filters.is_active)
    return stmt


class UserRepository(BaseRepository[User]):
    """IUserRepository over SQLAlchemy. Emails are stored and matched lower-cased."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, User)

    async def get_by_id(self, user_id: str) -> UserEntity | None:
        row = await self._get_row(user_id)
        return _to_entity(row) if row else None

    async def get_by_email(self, email: str) -> UserEntity | None:
        row = await self._get_row_by(User.email, email.strip().lower())
        return _to_entity(row) if row else None

    async def get_by_id_document(self, doc_type: str, number: str) -> UserEntity | None:
        result = await self.db.execute(
            select(User).where(
                User.id_document_type == doc_type, User.id_document_number == number
            )
        )
        row = result.scalars().first()
        return _to_entity(row) if row else None

    async def get_by_document_number(self, number: str) -> UserEntity | None:
        row = await self._get_row_by(User.id_document_number, number)
        return _to_entity(row) if row else None

    async def list_page(
        self, page: PageRequest, filters: UserFilters | None = None
    ) -> Page[UserEntity]:
        stmt = build_user_query(filters)
        count = await self._count(stmt)
        result = await self.db.execute(
            stmt.order_by(func.lower(User.surname), User.first_name)
            .offset(page.offset)
            .limit(page.size)
        )
        return Page(items=[_to_entity(r) for r in result.scalars().all()], count=count)

    async def list_active(self) -> list[UserEntity]:
        result = await self.db.execute(
            select(User).where(User.is_active.is_(True)).order_by(User.created_at)
        )
        return [_to_entity(r) for r in result.scalars().all()]

    async def create(self, user: UserEntity, password_hash: str) -> UserEntity:
        created_at = user.created_at
        row = User(
            id=user.id,
            first_name=user.first_name,
            second_name=user.second_name,
            surname=user.surname,
            second_surname=user.second_surname,
            email=user.email.strip().lower(),
            id_document_type=user.id_document.type,
            id_document_number=user.id_document.number,
            birthdate=user.birthdate,
            sex=user.sex,
            password_hash=password_hash,
            roles=[r.value for r in user.roles],
            group_name=user.group_name,
            profile_name=user.profile_name,
            hiring_type=user.hiring_type,
            service_names=list(user.service_names),
            is_active=user.is_active,
            created_at=created_at,
            updated_at=created_at,
        )
        await self._add(row)
        return _to_entity(row)

    async def update(self, user: UserEntity) -> UserEntity:
        row = await self._get_row(user.id)
        if row is None:
            raise ResourceNotFoundException("user", user.id)
        row.first_name = user.first_name
        row.second_name = user.second_name
        row.surname = user.surname
        row.second_surname = user.second_surname
        row.email = user.email.strip().lower()
        row.birthdate = user.birthdate
        row.sex = user.sex
        row.roles = [r.value for r in user.roles]
        row.is_active = user.is_active
        row.updated_at = utc_now()
        await self.db.flush()
        return _to_entity(row)
