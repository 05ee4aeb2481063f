"""Folder, Document and Attachment ORM models.

A folder belongs to exactly one user. Documents are unique per (user_id,
name). Attachment filenames are globally unique (they key the blob store).
document.current_attachment_id points at the attachment most recently
uploaded or replaced; the FK is created after both tables (use_alter).
"""

from datetime import date, datetime

from sqlalchemy import (
    Boolean,
    Date,
    DateTime,
    ForeignKey,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from dossier.infrastructure.persistence.database import Base
from dossier.infrastructure.persistence.models.mixins import BaseModel


class Attachment(BaseModel, Base):
    """Uploaded file reference. Table: attachment."""

    __tablename__ = "attachment"

    document_id: Mapped[str] = mapped_column(
        String, ForeignKey("document.id", ondelete="CASCADE"), nullable=False, index=True
    )
    filename: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="Pending")
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    expedition_date: Mapped[date | None] = mapped_column(Date, nullable=True)


class Document(BaseModel, Base):
    """Required document in a user's folder. Table: document."""

    __tablename__ = "document"

    folder_id: Mapped[str] = mapped_column(
        String, ForeignKey("folder.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id: Mapped[str] = mapped_column(
        String, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    state: Mapped[str] = mapped_column(String(20), nullable=False, default="Pending")
    format: Mapped[str | None] = mapped_column(String(50), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    has_expiration: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    expiration_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, index=True
    )
    rejection_message: Mapped[str | None] = mapped_column(String(500), nullable=True)
    current_attachment_id: Mapped[str | None] = mapped_column(
        String,
        ForeignKey(
            "attachment.id",
            ondelete="SET NULL",
            use_alter=True,
            name="fk_document_current_attachment",
        ),
        nullable=True,
    )

    attachments: Mapped[list[Attachment]] = relationship(
        lazy="selectin",
        order_by=Attachment.created_at,
        foreign_keys=[Attachment.document_id],
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        UniqueConstraint("user_id", "name", name="uq_document_user_name"),
    )


class Folder(BaseModel, Base):
    """A user's folder. Table: folder. One per user."""

    __tablename__ = "folder"

    user_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("app_user.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    state: Mapped[str] = mapped_column(String(20), nullable=False, default="Pending")
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    documents: Mapped[list[Document]] = relationship(
        lazy="selectin", order_by=Document.name, cascade="all, delete-orphan"
    )
