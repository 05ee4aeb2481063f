"""initial schema: catalog, users, folders, documents, attachments, expiration logs

Revision ID: a1c3e5f7b9d2
Revises:
Create Date: 2026-10-18

document.current_attachment_id -> attachment.id is added after both tables
exist (the two tables reference each other).
"""

from collections.abc import Sequence
from typing import Union

import sqlalchemy as sa
from alembic import op

revision: str = "a1c3e5f7b9d2"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def _link_table(name: str, left: str, right: str) -> None:
    op.create_table(
        name,
        sa.Column(f"{left}_id", sa.String(), nullable=False),
        sa.Column(f"{right}_id", sa.String(), nullable=False),
        sa.ForeignKeyConstraint([f"{left}_id"], [f"{left}.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint([f"{right}_id"], [f"{right}.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint(f"{left}_id", f"{right}_id"),
    )


def upgrade() -> None:
    op.create_table(
        "requisite",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("format", sa.String(50), nullable=True),
        sa.Column(
            "is_validity_required", sa.Boolean(), nullable=False, server_default="false"
        ),
        sa.Column("validity_value", sa.Integer(), nullable=True),
        sa.Column("validity_unit", sa.String(10), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )
    op.create_table(
        "group_",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )
    op.create_table(
        "profile",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )
    op.create_table(
        "hiring",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("type", sa.String(200), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("type"),
    )
    op.create_table(
        "service",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("category", sa.String(50), nullable=False),
        sa.Column("code", sa.Integer(), nullable=True),
        sa.Column("cost_center", sa.String(100), nullable=True),
        sa.Column("qualification_distinctive_number", sa.String(100), nullable=True),
        sa.Column("group_id", sa.String(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
        sa.ForeignKeyConstraint(["group_id"], ["group_.id"], ondelete="RESTRICT"),
    )
    op.create_index("ix_service_group_id", "service", ["group_id"])
    op.create_table(
        "service_location",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("service_id", sa.String(), nullable=False),
        sa.Column("tower", sa.String(100), nullable=False),
        sa.Column("floor", sa.String(100), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["service_id"], ["service.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_service_location_service_id", "service_location", ["service_id"])
    _link_table("profile_requisite", "profile", "requisite")
    _link_table("hiring_requisite", "hiring", "requisite")
    _link_table("service_requisite", "service", "requisite")
    _link_table("service_profile", "service", "profile")

    op.create_table(
        "app_user",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("second_name", sa.String(100), nullable=True),
        sa.Column("surname", sa.String(100), nullable=False),
        sa.Column("second_surname", sa.String(100), nullable=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("id_document_type", sa.String(20), nullable=False),
        sa.Column("id_document_number", sa.String(50), nullable=False),
        sa.Column("birthdate", sa.Date(), nullable=True),
        sa.Column("sex", sa.String(20), nullable=True),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("roles", sa.JSON(), nullable=False),
        sa.Column("group_name", sa.String(200), nullable=True),
        sa.Column("profile_name", sa.String(200), nullable=True),
        sa.Column("hiring_type", sa.String(200), nullable=True),
        sa.Column("service_names", sa.JSON(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
        sa.UniqueConstraint(
            "id_document_type", "id_document_number", name="uq_app_user_id_document"
        ),
    )
    op.create_index("ix_app_user_id_document_number", "app_user", ["id_document_number"])

    op.create_table(
        "folder",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("state", sa.String(20), nullable=False, server_default="Pending"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id"),
        sa.ForeignKeyConstraint(["user_id"], ["app_user.id"], ondelete="CASCADE"),
    )
    op.create_table(
        "document",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("folder_id", sa.String(), nullable=False),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("state", sa.String(20), nullable=False, server_default="Pending"),
        sa.Column("format", sa.String(50), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("has_expiration", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("expiration_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("rejection_message", sa.String(500), nullable=True),
        sa.Column("current_attachment_id", sa.String(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["folder_id"], ["folder.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["app_user.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("user_id", "name", name="uq_document_user_name"),
    )
    op.create_index("ix_document_folder_id", "document", ["folder_id"])
    op.create_index("ix_document_user_id", "document", ["user_id"])
    op.create_index("ix_document_expiration_date", "document", ["expiration_date"])
    op.create_table(
        "attachment",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("document_id", sa.String(), nullable=False),
        sa.Column("filename", sa.String(255), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="Pending"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("expedition_date", sa.Date(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("filename"),
        sa.ForeignKeyConstraint(["document_id"], ["document.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_attachment_document_id", "attachment", ["document_id"])
    op.create_foreign_key(
        "fk_document_current_attachment",
        "document",
        "attachment",
        ["current_attachment_id"],
        ["id"],
        ondelete="SET NULL",
    )

    op.create_table(
        "expiration_log",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column("documents", sa.JSON(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["app_user.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_expiration_log_user_id", "expiration_log", ["user_id"])


def downgrade() -> None:
    op.drop_index("ix_expiration_log_user_id", table_name="expiration_log")
    op.drop_table("expiration_log")
    op.drop_constraint("fk_document_current_attachment", "document", type_="foreignkey")
    op.drop_index("ix_attachment_document_id", table_name="attachment")
    op.drop_table("attachment")
    op.drop_index("ix_document_expiration_date", table_name="document")
    op.drop_index("ix_document_user_id", table_name="document")
    op.drop_index("ix_document_folder_id", table_name="document")
    op.drop_table("document")
    op.drop_table("folder")
    op.drop_index("ix_app_user_id_document_number", table_name="app_user")
    op.drop_table("app_user")
    for table in ("service_profile", "service_requisite", "hiring_requisite", "profile_requisite"):
        op.drop_table(table)
    op.drop_index("ix_service_location_service_id", table_name="service_location")
    op.drop_table("service_location")
    op.drop_index("ix_service_group_id", table_name="service")
    op.drop_table("service")
    op.drop_table("hiring")
    op.drop_table("profile")
    op.drop_table("group_")
    op.drop_table("requisite")
