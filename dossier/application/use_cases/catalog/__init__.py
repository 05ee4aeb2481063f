from dossier.application.use_cases.catalog.assignment_catalog import (
    AssignmentCatalogService,
)
from dossier.application.use_cases.catalog.requisite_operations import (
    RequisiteCatalogService,
)

__all__ = ["AssignmentCatalogService", "RequisiteCatalogService"]
