"""User ORM model. Table: app_user (user is reserved in PostgreSQL)."""

from datetime import date
from typing import Any

from sqlalchemy import JSON, Boolean, Date, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from dossier.infrastructure.persistence.database import Base
from dossier.infrastructure.persistence.models.mixins import BaseModel


class User(BaseModel, Base):
    """User account. Unique email and (id_document_type, id_document_number).

    Roles and service names are JSON arrays; assignments are stored by name
    as they were resolved when the folder was scaffolded.
    """

    __tablename__ = "app_user"

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    second_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    surname: Mapped[str] = mapped_column(String(100), nullable=False)
    second_surname: Mapped[str | None] = mapped_column(String(100), nullable=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    id_document_type: Mapped[str] = mapped_column(String(20), nullable=False)
    id_document_number: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    birthdate: Mapped[date | None] = mapped_column(Date, nullable=True)
    sex: Mapped[str | None] = mapped_column(String(20), nullable=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    roles: Mapped[list[Any]] = mapped_column(JSON, nullable=False, default=list)
    group_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    profile_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    hiring_type: Mapped[str | None] = mapped_column(String(200), nullable=True)
    service_names: Mapped[list[Any]] = mapped_column(JSON, nullable=False, default=list)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    __table_args__ = (
        UniqueConstraint(
            "id_document_type", "id_document_number", name="uq_app_user_id_document"
        ),
    )
