"""Expiration API: per-user logs and an on-demand sweep."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request

from dossier.api.v1.dependencies import (
    get_expiration_log_query_service,
    get_run_expiration_sweep_use_case,
    require_folder_access,
    require_roles,
)
from dossier.application.use_cases.expirations import (
    ExpirationLogQueryService,
    RunExpirationSweepUseCase,
)
from dossier.core.limiter import limit_sweep
from dossier.domain.entities import UserEntity
from dossier.domain.enums import Role
from dossier.schemas.expiration import ExpirationLogResponse, ExpirationSweepResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/run", response_model=ExpirationSweepResponse)
@limit_sweep
async def run_expiration_sweep(
    request: Request,
    use_case: Annotated[
        RunExpirationSweepUseCase, Depends(get_run_expiration_sweep_use_case)
    ],
    current_user: Annotated[UserEntity, Depends(require_roles(Role.SUPERUSER, Role.MODERATOR))],
):
    """Run the expiration sweep now and return its counts."""
    logger.info("Expiration sweep triggered by user %s", current_user.id)
    summary = await use_case.run()
    return ExpirationSweepResponse.model_validate(summary)


@router.get("/{user_id}", response_model=list[ExpirationLogResponse])
async def list_expiration_logs(
    user_id: str,
    queries: Annotated[
        ExpirationLogQueryService, Depends(get_expiration_log_query_service)
    ],
    _: Annotated[UserEntity, Depends(require_folder_access)],
):
    """Expiration logs of one user, newest first."""
    logs = await queries.list_by_user(user_id)
    return [ExpirationLogResponse.model_validate(log) for log in logs]
