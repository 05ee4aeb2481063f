"""Application lifespan: startup and shutdown.

Only wiring of infrastructure here: shared HTTP client, the optional
in-process expiration sweep loop, and DB engine dispose.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from dossier.core.config import get_settings
from dossier.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


async def run_sweep_loop(
    interval_seconds: int, http_client: httpx.AsyncClient | None = None
) -> None:
    """Run the expiration sweep every interval_seconds until cancelled.

    A failed run is logged; the loop keeps its schedule.
    """
    from dossier.infrastructure.bootstrap import run_expiration_sweep

    while True:
        await asyncio.sleep(interval_seconds)
        try:
            await run_expiration_sweep(http_client)
        except Exception:
            logger.exception("Scheduled expiration sweep failed")


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Shutdown order: sweep task cancel, shared HTTP client close, SQL engine dispose.
    """
    settings = get_settings()
    setup_logging()

    # ---- Startup ----
    # Shared HTTP client for blob store and email calls (connection reuse).
    app.state.http_client = httpx.AsyncClient(timeout=settings.storage_timeout_seconds)

    if settings.expiration_sweep_enabled:
        app.state.expiration_sweep_task = asyncio.create_task(
            run_sweep_loop(
                settings.expiration_sweep_interval_seconds, app.state.http_client
            )
        )
        logger.info(
            "Expiration sweep scheduled every %d seconds",
            settings.expiration_sweep_interval_seconds,
        )
    else:
        app.state.expiration_sweep_task = None

    yield

    # ---- Shutdown ----
    sweep_task = getattr(app.state, "expiration_sweep_task", None)
    if sweep_task is not None:
        sweep_task.cancel()
        try:
            await sweep_task
        except asyncio.CancelledError:
            pass
        logger.info("Expiration sweep task stopped")

    if getattr(app.state, "http_client", None) is not None:
        await app.state.http_client.aclose()
        app.state.http_client = None
        logger.info("Shared HTTP client closed")

    from dossier.infrastructure.persistence import database

    await database.dispose_engine()
