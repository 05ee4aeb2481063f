"""Blob storage factory: creates the HTTP or local backend from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from dossier.infrastructure.external.storage.protocol import BlobStorageProtocol

if TYPE_CHECKING:
    import httpx

    from dossier.core.config import Settings


class StorageFactory:
    """Factory for blob storage instances based on configuration."""

    @staticmethod
    def create_storage_service(
        settings: Settings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> BlobStorageProtocol:
        """Create blob storage from settings.

        Args:
            settings: Application settings; if None, uses get_settings().
            http_client: Optional shared httpx.AsyncClient for connection reuse.

        Returns:
            HttpBlobStorage or LocalBlobStorage.

        Raises:
            ValueError: Unknown backend or missing required config.
        """
        from dossier.core.config import get_settings

        s = settings or get_settings()
        backend = s.storage_backend.lower()

        if backend == "local":
            from dossier.infrastructure.external.storage.local_storage import (
                LocalBlobStorage,
            )

            if not s.storage_root:
                raise ValueError("STORAGE_ROOT required for local backend")
            return LocalBlobStorage(storage_root=s.storage_root)
        if backend == "http":
            from dossier.infrastructure.external.storage.http_storage import (
                HttpBlobStorage,
            )

            if not s.storage_url:
                raise ValueError("STORAGE_URL required for http backend")
            return HttpBlobStorage(
                s.storage_url,
                timeout_seconds=s.storage_timeout_seconds,
                max_retries=s.storage_max_retries,
                backoff_seconds=s.storage_retry_backoff_seconds,
                http_client=http_client,
            )
        raise ValueError(
            f"Unknown storage backend: {backend}. Supported: 'http', 'local'"
        )
