"""DTOs for document and attachment use cases (no dependency on ORM)."""

from dataclasses import dataclass
from typing import Any

from dossier.domain.entities.folder import AttachmentEntity, DocumentEntity


@dataclass(frozen=True)
class ExpeditionDateResult:
    """Result of recording an expedition date."""

    document: DocumentEntity
    attachment: AttachmentEntity
    expiration_message: str


@dataclass(frozen=True)
class DownloadedAttachment:
    """Attachment bytes fetched from the blob store."""

    filename: str
    content: bytes
    content_type: str


@dataclass(frozen=True)
class StoredFileList:
    """One page of the blob store listing."""

    items: list[dict[str, Any]]
    count: int
