"""Blob storage: simple-storage HTTP service and local filesystem backends.

Factory creates the backend from dossier.core.config. Implementations are
loaded lazily inside StorageFactory.create_storage_service().
"""

from dossier.infrastructure.external.storage.factory import StorageFactory
from dossier.infrastructure.external.storage.protocol import BlobStorageProtocol

__all__ = [
    "BlobStorageProtocol",
    "StorageFactory",
]
