"""Infrastructure exceptions for blob storage and email delivery.

Every error extends DossierException so the API maps them to HTTP
responses consistently. Transport failures (after retries) extend
ServiceUnavailableException and surface as 503.
"""

from dossier.domain.exceptions import DossierException, ServiceUnavailableException


class StorageException(DossierException):
    """Base exception for blob storage operations that are not transport failures."""


class StorageNotFoundError(StorageException):
    """File not found in the blob store."""

    def __init__(self, filename: str) -> None:
        super().__init__(
            f"File not found: {filename}",
            "STORAGE_NOT_FOUND",
            {"filename": filename},
        )


class StoragePermissionError(StorageException):
    """Filename resolves outside the storage root."""

    def __init__(self, filename: str, operation: str) -> None:
        super().__init__(
            f"Permission denied for {operation} on {filename}",
            "STORAGE_PERMISSION_ERROR",
            {"filename": filename, "operation": operation},
        )


class StorageUnavailableError(ServiceUnavailableException):
    """Blob store call failed (connection error, timeout, or 5xx) after retries."""

    def __init__(self, operation: str, filename: str | None, reason: str) -> None:
        target = f" for {filename}" if filename else ""
        super().__init__("storage", f"Blob store {operation} failed{target}")
        self.details.update({"operation": operation, "reason": reason})
        if filename:
            self.details["filename"] = filename


class EmailDeliveryError(ServiceUnavailableException):
    """Email provider rejected or could not be reached for a message."""

    def __init__(self, recipient: str, reason: str) -> None:
        super().__init__("email", f"Could not send email to '{recipient}'")
        self.details.update({"recipient": recipient, "reason": reason})
