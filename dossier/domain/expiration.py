"""Expiration math and reminder messages for dated documents.

Pure functions; callers pass ``now`` so results are deterministic in tests.
"""

import math
from datetime import date, datetime, timedelta
from enum import Enum

from dossier.domain.entities.requisite import RequisiteEntity
from dossier.domain.exceptions import ValidationException
from dossier.shared.utils.datetime import as_utc_datetime

_SECONDS_PER_DAY = 24 * 60 * 60


class ExpirationBucket(str, Enum):
    """Where a dated document stands relative to today."""

    OVERDUE = "overdue"
    NEAR_EXPIRY = "near_expiry"
    NOT_YET_DUE = "not_yet_due"


def compute_expiration_date(
    expedition_date: date | datetime | None, requisite: RequisiteEntity
) -> datetime:
    """Return expedition_date plus the requisite's validity period.

    Raises:
        ValidationException: Expedition date missing, or the requisite
            does not require validity.
    """
    if expedition_date is None:
        raise ValidationException("Expedition date is required", field="expedition_date")
    validity_days = requisite.validity_days()
    return as_utc_datetime(expedition_date) + timedelta(days=validity_days)


def signed_days_until(expiration_date: datetime, now: datetime) -> int:
    """Whole days from now until expiration_date, rounded up; negative when past."""
    delta = as_utc_datetime(expiration_date) - as_utc_datetime(now)
    return math.ceil(delta.total_seconds() / _SECONDS_PER_DAY)


def days_to_expiration(expiration_date: datetime, now: datetime) -> int:
    """Days left before expiration, clamped at 0 once the date has passed."""
    if as_utc_datetime(expiration_date) < as_utc_datetime(now):
        return 0
    return max(0, signed_days_until(expiration_date, now))


def classify_expiration(
    expiration_date: datetime, now: datetime, alert_days: int
) -> ExpirationBucket:
    """Return the reminder bucket for a dated document."""
    if as_utc_datetime(expiration_date) < as_utc_datetime(now):
        return ExpirationBucket.OVERDUE
    if signed_days_until(expiration_date, now) <= alert_days:
        return ExpirationBucket.NEAR_EXPIRY
    return ExpirationBucket.NOT_YET_DUE


def expiration_message(
    document_name: str,
    expiration_date: datetime | None,
    now: datetime,
    alert_days: int,
) -> str:
    """Human-readable status line used in reminder emails and API responses."""
    if expiration_date is None:
        return f"There is no expiration date for document '{document_name}'."
    bucket = classify_expiration(expiration_date, now, alert_days)
    days = signed_days_until(expiration_date, now)
    if bucket is ExpirationBucket.OVERDUE:
        return f"Document '{document_name}' expired {abs(days)} days ago."
    if bucket is ExpirationBucket.NEAR_EXPIRY:
        return (
            f"Warning: document '{document_name}' expires within the next "
            f"{alert_days} days or less."
        )
    return f"Document '{document_name}' will expire in {days} days."
