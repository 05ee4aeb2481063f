"""Application use cases: one entry point per workflow."""

from dossier.application.use_cases.catalog import (
    AssignmentCatalogService,
    RequisiteCatalogService,
)
from dossier.application.use_cases.documents import (
    AttachmentQueryService,
    AttachmentReviewService,
    AttachmentUploadService,
    DocumentLifecycleService,
)
from dossier.application.use_cases.expirations import (
    ExpirationLogQueryService,
    RunExpirationSweepUseCase,
)
from dossier.application.use_cases.users import CreateUserUseCase, UserQueryService

__all__ = [
    "AssignmentCatalogService",
    "AttachmentQueryService",
    "AttachmentReviewService",
    "AttachmentUploadService",
    "CreateUserUseCase",
    "DocumentLifecycleService",
    "ExpirationLogQueryService",
    "RequisiteCatalogService",
    "RunExpirationSweepUseCase",
    "UserQueryService",
]
