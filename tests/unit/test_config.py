"""Unit tests for Settings validation."""

import pytest
from pydantic import ValidationError

from dossier.core.config import Settings

BASE = {
    "_env_file": None,
    "database_url": "postgresql+asyncpg://u:p@localhost:5432/dossier",
    "secret_key": "x" * 32,
    "storage_backend": "local",
    "email_backend": "log",
}


def _settings(**overrides) -> Settings:
    return Settings(**{**BASE, **overrides})


def test_valid_settings() -> None:
    settings = _settings()
    assert settings.expiration_alert_days == 30
    assert settings.secret_key.get_secret_value() == "x" * 32


@pytest.mark.parametrize(
    ("overrides", "message"),
    [
        ({"database_url": ""}, "DATABASE_URL is required"),
        ({"secret_key": ""}, "SECRET_KEY is required"),
        ({"storage_backend": "http", "storage_url": ""}, "STORAGE_URL is required"),
        ({"storage_backend": "s3"}, "Invalid storage_backend"),
        ({"email_backend": "brevo", "brevo_api_key": None}, "BREVO_API_KEY is required"),
        ({"email_backend": "smtp"}, "Invalid email_backend"),
        ({"expiration_alert_days": -1}, "EXPIRATION_ALERT_DAYS"),
        ({"expiration_sweep_interval_seconds": 10}, "EXPIRATION_SWEEP_INTERVAL_SECONDS"),
    ],
)
def test_invalid_settings(overrides, message) -> None:
    with pytest.raises(ValidationError, match=message):
        _settings(**overrides)


def test_http_backend_with_url() -> None:
    settings = _settings(storage_backend="http", storage_url="http://storage:8080")
    assert settings.storage_url == "http://storage:8080"
