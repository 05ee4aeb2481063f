from dossier.application.use_cases.documents.attachment_operations import (
    AttachmentQueryService,
    AttachmentReviewService,
    AttachmentUploadService,
    ensure_pdf,
)
from dossier.application.use_cases.documents.document_lifecycle import (
    DocumentLifecycleService,
    parse_state,
)

__all__ = [
    "AttachmentQueryService",
    "AttachmentReviewService",
    "AttachmentUploadService",
    "DocumentLifecycleService",
    "ensure_pdf",
    "parse_state",
]
