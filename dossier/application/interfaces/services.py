"""Service interfaces (ports) for the application layer.

Protocols define contracts for external collaborators: blob store,
notification delivery, and password hashing (DIP).
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from dossier.application.dtos.document import StoredFileList
    from dossier.domain.enums import NotificationType


# Blob storage interface
class IBlobStorage(Protocol):
    """Protocol for the blob store that holds attachment bytes, keyed by filename."""

    async def upload(self, filename: str, content: bytes, content_type: str) -> str:
        """Store content under filename (overwriting). Returns the stored filename."""

    async def download(self, filename: str) -> bytes:
        """Return the bytes stored under filename."""

    async def delete(self, filename: str) -> bool:
        """Delete filename. Returns True if deleted, False if not found."""

    async def list_files(self, offset: int, limit: int) -> StoredFileList:
        """Return one page of stored files."""


# Notification service interface
class INotificationService(Protocol):
    """Protocol for user-facing email notifications.

    Implementations raise ServiceUnavailableException when delivery fails.
    """

    async def send_credentials(self, email: str, full_name: str, password: str) -> None:
        """Send login credentials to a newly created user."""

    async def send_expiration_digest(
        self, email: str, full_name: str, messages: list[str]
    ) -> None:
        """Send the consolidated weekly expiration reminder."""

    async def send_expiration_update(
        self,
        email: str,
        document_name: str,
        expiration_date: datetime,
        message: str,
    ) -> None:
        """Tell a user the expiration date of one document was (re)computed."""

    async def send_review_notification(
        self,
        email: str,
        notification_type: NotificationType,
        user_id: str,
        details: str,
    ) -> None:
        """Send a review workflow notification (collaborator or revisor)."""


# Password hashing interface
class IPasswordHasher(Protocol):
    """Protocol for hashing account passwords."""

    def hash(self, password: str) -> str:
        """Return a salted hash for password."""
