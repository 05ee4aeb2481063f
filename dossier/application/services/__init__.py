"""Application services: requisite resolution and workbook parsing."""

from dossier.application.services.assignment_resolver import (
    AssignmentResolver,
    merge_requisites,
)
from dossier.application.services.requisite_workbook import (
    parse_requisite_row,
    read_requisite_workbook,
)

__all__ = [
    "AssignmentResolver",
    "merge_requisites",
    "parse_requisite_row",
    "read_requisite_workbook",
]
