"""Load requisites from an .xlsx workbook into the catalog.

Usage:
    python -m scripts.load_requisites_from_excel <path/to/requisites.xlsx>
Columns (first sheet, header row skipped): name, description,
is_validity_required, validity_value, validity_unit, is_active.
Existing names are left untouched.
"""

import asyncio
import sys
from pathlib import Path

import dossier.infrastructure.persistence.database as database
from dossier.application.use_cases.catalog import RequisiteCatalogService
from dossier.core.config import get_settings
from dossier.domain.exceptions import ValidationException
from dossier.infrastructure.persistence.repositories import RequisiteRepository


async def main() -> int:
    if len(sys.argv) != 2:
        print(
            "Usage: python -m scripts.load_requisites_from_excel <workbook.xlsx>",
            file=sys.stderr,
        )
        return 1
    path = Path(sys.argv[1])
    if not path.is_file():
        print(f"File not found: {path}", file=sys.stderr)
        return 1

    get_settings()
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        print("AsyncSessionLocal not configured", file=sys.stderr)
        return 1
    try:
        async with database.AsyncSessionLocal() as session:
            async with session.begin():
                catalog = RequisiteCatalogService(RequisiteRepository(session))
                result = await catalog.import_workbook(path.read_bytes())
    except ValidationException as exc:
        print(f"Invalid workbook: {exc.message}", file=sys.stderr)
        return 1
    finally:
        await database.dispose_engine()

    print(f"Created {result.created} requisite(s)")
    if result.skipped_existing:
        print(f"Already present: {', '.join(result.skipped_existing)}")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
