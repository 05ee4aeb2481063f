"""Blob storage protocol (DIP). Implementations: HttpBlobStorage, LocalBlobStorage."""

from typing import Protocol

from dossier.application.dtos.document import StoredFileList


class BlobStorageProtocol(Protocol):
    """Protocol for blob store backends keyed by attachment filename."""

    async def upload(self, filename: str, content: bytes, content_type: str) -> str:
        """Store content under filename, overwriting any previous bytes."""
        ...

    async def download(self, filename: str) -> bytes:
        """Return the stored bytes. Raises StorageNotFoundError when missing."""
        ...

    async def delete(self, filename: str) -> bool:
        """Delete file. Returns True if deleted, False if not found."""
        ...

    async def list_files(self, offset: int, limit: int) -> StoredFileList:
        """Return one page of stored files and the total count."""
        ...
