"""Parse requisite rows from an Excel workbook (openpyxl).

Expected columns, after a header row: name, description,
is_validity_required, validity_value, validity_unit, is_active.
"""

from __future__ import annotations

import io
import logging
from typing import Any

from openpyxl import load_workbook

from dossier.application.dtos.catalog import RequisiteCreate
from dossier.domain.enums import ValidityUnit
from dossier.domain.exceptions import ValidationException

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"true", "yes", "si", "sí", "1", "x"}
_UNIT_ALIASES: dict[str, ValidityUnit] = {
    "day": ValidityUnit.DAY,
    "days": ValidityUnit.DAY,
    "dia": ValidityUnit.DAY,
    "día": ValidityUnit.DAY,
    "month": ValidityUnit.MONTH,
    "months": ValidityUnit.MONTH,
    "mes": ValidityUnit.MONTH,
    "year": ValidityUnit.YEAR,
    "years": ValidityUnit.YEAR,
    "año": ValidityUnit.YEAR,
}


def _as_bool(value: Any, default: bool) -> bool:
    if value is None or (isinstance(value, str) and not value.strip()):
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    return str(value).strip().lower() in _TRUE_VALUES


def _as_text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _as_unit(value: Any) -> ValidityUnit | None:
    text = _as_text(value)
    if text is None:
        return None
    return _UNIT_ALIASES.get(text.lower())


def _as_int(value: Any) -> int | None:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return None


def parse_requisite_row(row: tuple[Any, ...]) -> RequisiteCreate | None:
    """Return a RequisiteCreate for one data row, or None when the row is unusable."""
    cells = list(row) + [None] * (6 - len(row))
    name = _as_text(cells[0])
    if name is None:
        return None
    is_validity_required = _as_bool(cells[2], default=False)
    validity_value = _as_int(cells[3])
    validity_unit = _as_unit(cells[4])
    if is_validity_required and (validity_value is None or validity_unit is None):
        logger.warning(
            "Skipping requisite row '%s': validity required but value/unit missing", name
        )
        return None
    return RequisiteCreate(
        name=name,
        description=_as_text(cells[1]),
        is_validity_required=is_validity_required,
        validity_value=validity_value if is_validity_required else None,
        validity_unit=validity_unit if is_validity_required else None,
        is_active=_as_bool(cells[5], default=True),
    )


def read_requisite_workbook(content: bytes) -> list[RequisiteCreate]:
    """Read requisites from the first sheet of an .xlsx file.

    Duplicate names within the workbook keep the first row.

    Raises:
        ValidationException: File is not a readable workbook or has no valid rows.
    """
    try:
        workbook = load_workbook(io.BytesIO(content), read_only=True, data_only=True)
    except Exception as exc:  # openpyxl raises several unrelated types for bad input
        raise ValidationException(
            f"Could not read Excel workbook: {exc}", field="file"
        ) from exc
    try:
        sheet = workbook.active
        if sheet is None:
            raise ValidationException("Workbook has no sheets", field="file")
        rows: list[RequisiteCreate] = []
        seen: set[str] = set()
        for row in sheet.iter_rows(min_row=2, values_only=True):
            parsed = parse_requisite_row(row)
            if parsed is None or parsed.name in seen:
                continue
            seen.add(parsed.name)
            rows.append(parsed)
    finally:
        workbook.close()
    if not rows:
        raise ValidationException("No valid requisite rows found in workbook", field="file")
    return rows
