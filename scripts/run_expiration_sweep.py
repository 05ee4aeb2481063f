"""Run one expiration sweep and exit (for an external weekly cron).

Usage:
    python -m scripts.run_expiration_sweep
Exits 1 when any user failed, so cron can alert.
"""

import asyncio
import sys

import httpx

from dossier.core.config import get_settings
from dossier.infrastructure.bootstrap import run_expiration_sweep
from dossier.infrastructure.persistence.database import dispose_engine
from dossier.shared.telemetry.logging import setup_logging


async def main() -> int:
    settings = get_settings()
    setup_logging()
    try:
        async with httpx.AsyncClient(timeout=settings.storage_timeout_seconds) as client:
            summary = await run_expiration_sweep(client)
    finally:
        await dispose_engine()
    print(
        f"Scanned {summary.users_scanned} user(s): {summary.logs_written} log(s) written, "
        f"{summary.users_skipped} skipped, {summary.users_failed} failed"
    )
    return 1 if summary.failed_user_ids else 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
