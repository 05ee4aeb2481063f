"""External service dependencies: blob storage and notifications.

Both reuse the shared httpx client created in the app lifespan.
"""

from __future__ import annotations

from fastapi import Request

from dossier.application.interfaces.services import IBlobStorage, INotificationService
from dossier.infrastructure.bootstrap import build_notifier
from dossier.infrastructure.external.storage import StorageFactory


def get_blob_storage(request: Request) -> IBlobStorage:
    """Blob storage backend from settings (composition root)."""
    http_client = getattr(request.app.state, "http_client", None)
    return StorageFactory.create_storage_service(http_client=http_client)


def get_notifier(request: Request) -> INotificationService:
    """Email notification service from settings (composition root)."""
    http_client = getattr(request.app.state, "http_client", None)
    return build_notifier(http_client=http_client)
