"""Presentation-layer dependency injection (composition root).

Use cases are built from infrastructure implementations here; routes
depend only on these dependencies, never on repositories directly.
"""

from .auth import (
    get_current_user,
    get_current_user_optional,
    get_user_repo,
    require_catalog_admin,
    require_folder_access,
    require_reviewer,
    require_roles,
)
from .catalog import (
    get_assignment_catalog_service,
    get_assignment_catalog_service_for_write,
    get_requisite_catalog_service,
    get_requisite_catalog_service_for_write,
)
from .documents import (
    get_attachment_query_service,
    get_attachment_review_service,
    get_attachment_upload_service,
    get_document_lifecycle_service,
    get_document_lifecycle_service_for_write,
)
from .expirations import (
    get_expiration_log_query_service,
    get_run_expiration_sweep_use_case,
)
from .services import get_blob_storage, get_notifier
from .users import (
    get_create_user_use_case,
    get_user_management_service,
    get_user_query_service,
)

__all__ = [
    "get_assignment_catalog_service",
    "get_assignment_catalog_service_for_write",
    "get_attachment_query_service",
    "get_attachment_review_service",
    "get_attachment_upload_service",
    "get_blob_storage",
    "get_create_user_use_case",
    "get_current_user",
    "get_current_user_optional",
    "get_document_lifecycle_service",
    "get_document_lifecycle_service_for_write",
    "get_expiration_log_query_service",
    "get_notifier",
    "get_requisite_catalog_service",
    "get_requisite_catalog_service_for_write",
    "get_run_expiration_sweep_use_case",
    "get_user_management_service",
    "get_user_query_service",
    "get_user_repo",
    "require_catalog_admin",
    "require_folder_access",
    "require_reviewer",
    "require_roles",
]
