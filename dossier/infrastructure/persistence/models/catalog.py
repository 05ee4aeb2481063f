"""Catalog ORM models: requisites and the assignments that reference them.

Profiles, hirings and services link to requisites through association
tables; services also link to profiles and own their tower/floor locations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Integer,
    String,
    Table,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from dossier.infrastructure.persistence.database import Base
from dossier.infrastructure.persistence.models.mixins import BaseModel, CuidMixin

profile_requisite = Table(
    "profile_requisite",
    Base.metadata,
    Column("profile_id", ForeignKey("profile.id", ondelete="CASCADE"), primary_key=True),
    Column(
        "requisite_id", ForeignKey("requisite.id", ondelete="CASCADE"), primary_key=True
    ),
)

hiring_requisite = Table(
    "hiring_requisite",
    Base.metadata,
    Column("hiring_id", ForeignKey("hiring.id", ondelete="CASCADE"), primary_key=True),
    Column(
        "requisite_id", ForeignKey("requisite.id", ondelete="CASCADE"), primary_key=True
    ),
)

service_requisite = Table(
    "service_requisite",
    Base.metadata,
    Column("service_id", ForeignKey("service.id", ondelete="CASCADE"), primary_key=True),
    Column(
        "requisite_id", ForeignKey("requisite.id", ondelete="CASCADE"), primary_key=True
    ),
)

service_profile = Table(
    "service_profile",
    Base.metadata,
    Column("service_id", ForeignKey("service.id", ondelete="CASCADE"), primary_key=True),
    Column("profile_id", ForeignKey("profile.id", ondelete="CASCADE"), primary_key=True),
)


class Requisite(BaseModel, Base):
    """Requisite. Table: requisite. Unique name.

    validity_value/validity_unit are set only when is_validity_required.
    """

    __tablename__ = "requisite"

    name: Mapped[str] = mapped_column(String(200), nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    format: Mapped[str | None] = mapped_column(String(50), nullable=True)
    is_validity_required: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )
    validity_value: Mapped[int | None] = mapped_column(Integer, nullable=True)
    validity_unit: Mapped[str | None] = mapped_column(String(10), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)


class Group(BaseModel, Base):
    """Group (organizational unit). Table: group_. Unique name."""

    __tablename__ = "group_"

    name: Mapped[str] = mapped_column(String(200), nullable=False, unique=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)


class Profile(BaseModel, Base):
    """Profile (job profile). Table: profile. Unique name."""

    __tablename__ = "profile"

    name: Mapped[str] = mapped_column(String(200), nullable=False, unique=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    requisites: Mapped[list[Requisite]] = relationship(
        secondary=profile_requisite, lazy="selectin", order_by=Requisite.name
    )


class Hiring(BaseModel, Base):
    """Hiring type (contract kind). Table: hiring. Unique type."""

    __tablename__ = "hiring"

    type: Mapped[str] = mapped_column(String(200), nullable=False, unique=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    requisites: Mapped[list[Requisite]] = relationship(
        secondary=hiring_requisite, lazy="selectin", order_by=Requisite.name
    )


class ServiceLocation(CuidMixin, Base):
    """Tower/floor where a service operates. Table: service_location."""

    __tablename__ = "service_location"

    service_id: Mapped[str] = mapped_column(
        String, ForeignKey("service.id", ondelete="CASCADE"), nullable=False, index=True
    )
    tower: Mapped[str] = mapped_column(String(100), nullable=False)
    floor: Mapped[str] = mapped_column(String(100), nullable=False)


class Service(BaseModel, Base):
    """Service (operational unit inside a group). Table: service. Unique name."""

    __tablename__ = "service"

    name: Mapped[str] = mapped_column(String(200), nullable=False, unique=True)
    category: Mapped[str] = mapped_column(String(50), nullable=False)
    code: Mapped[int | None] = mapped_column(Integer, nullable=True)
    cost_center: Mapped[str | None] = mapped_column(String(100), nullable=True)
    qualification_distinctive_number: Mapped[str | None] = mapped_column(
        String(100), nullable=True
    )
    group_id: Mapped[str] = mapped_column(
        String, ForeignKey("group_.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    group: Mapped[Group] = relationship(lazy="joined")
    profiles: Mapped[list[Profile]] = relationship(
        secondary=service_profile, lazy="selectin", order_by=Profile.name
    )
    requisites: Mapped[list[Requisite]] = relationship(
        secondary=service_requisite, lazy="selectin", order_by=Requisite.name
    )
    locations: Mapped[list[ServiceLocation]] = relationship(
        lazy="selectin", cascade="all, delete-orphan"
    )
