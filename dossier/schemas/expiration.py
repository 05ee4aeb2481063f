"""Expiration log and sweep API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class ExpirationLogEntrySchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    document_name: str
    id_attachment: str
    expiration_date: datetime
    days_to_expiration: int


class ExpirationLogResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    documents: list[ExpirationLogEntrySchema]
    created_at: datetime


class ExpirationSweepResponse(BaseModel):
    """Counts from one sweep run."""

    model_config = ConfigDict(from_attributes=True)

    users_scanned: int
    users_skipped: int
    users_failed: int
    logs_written: int
    emails_sent: int
    failed_user_ids: list[str]
