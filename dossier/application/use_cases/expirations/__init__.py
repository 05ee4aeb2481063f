from dossier.application.use_cases.expirations.expiration_logs import (
    ExpirationLogQueryService,
)
from dossier.application.use_cases.expirations.run_expiration_sweep import (
    RunExpirationSweepUseCase,
    build_digest_messages,
    build_log_entries,
)

__all__ = [
    "ExpirationLogQueryService",
    "RunExpirationSweepUseCase",
    "build_digest_messages",
    "build_log_entries",
]
