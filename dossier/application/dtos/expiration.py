"""DTOs for the expiration sweep and expiration logs."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class ExpirationLogEntry:
    """One dated document as recorded by a sweep."""

    document_name: str
    id_attachment: str
    expiration_date: datetime
    days_to_expiration: int


@dataclass(frozen=True)
class ExpirationLogResult:
    """Persisted expiration log (one per user per sweep)."""

    id: str
    user_id: str
    documents: list[ExpirationLogEntry]
    created_at: datetime


@dataclass(frozen=True)
class ExpirationSweepSummary:
    """Counts from one expiration sweep."""

    users_scanned: int = 0
    users_skipped: int = 0
    logs_written: int = 0
    emails_sent: int = 0
    failed_user_ids: list[str] = field(default_factory=list)

    @property
    def users_failed(self) -> int:
        return len(self.failed_user_ids)
