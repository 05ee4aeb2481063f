"""ExpirationLog ORM model. Append-only record of one sweep for one user."""

from typing import Any

from sqlalchemy import JSON, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from dossier.infrastructure.persistence.database import Base
from dossier.infrastructure.persistence.models.mixins import BaseModel


class ExpirationLog(BaseModel, Base):
    """Expiration log. Table: expiration_log.

    documents: [{document_name, id_attachment, expiration_date, days_to_expiration}]
    """

    __tablename__ = "expiration_log"

    user_id: Mapped[str] = mapped_column(
        String, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    documents: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False)
