"""Shared utilities: datetime, generators, retry."""

from dossier.shared.utils.datetime import (
    as_utc_datetime,
    ensure_utc,
    is_same_month,
    utc_now,
)
from dossier.shared.utils.generators import (
    generate_attachment_filename,
    generate_cuid,
    generate_strong_password,
)
from dossier.shared.utils.retry import retry_async

__all__ = [
    "as_utc_datetime",
    "ensure_utc",
    "generate_attachment_filename",
    "generate_cuid",
    "generate_strong_password",
    "is_same_month",
    "retry_async",
    "utc_now",
]
