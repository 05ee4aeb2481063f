"""Blob store client for the simple-storage HTTP service.

Wire format:
    PUT    {base}/                 multipart field "file" (filename = storage key)
    GET    {base}/{filename}       raw bytes
    DELETE {base}/{filename}
    GET    {base}/files?offset&limit  -> {"files": [...], "total": n}

Connection errors, timeouts and 5xx responses are retried with exponential
backoff; 4xx responses are not.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any
from urllib.parse import quote

import httpx

from dossier.application.dtos.document import StoredFileList
from dossier.infrastructure.exceptions import (
    StorageNotFoundError,
    StorageUnavailableError,
)
from dossier.shared.telemetry.logging import get_logger
from dossier.shared.utils.retry import retry_async

logger = get_logger(__name__)


class _RetryableStatus(Exception):
    """5xx from the blob store; worth another attempt."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"HTTP {status_code}")
        self.status_code = status_code


_RETRYABLE = (httpx.TransportError, _RetryableStatus)


class HttpBlobStorage:
    """BlobStorageProtocol implementation over httpx."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout_seconds: float = 30.0,
        max_retries: int = 3,
        backoff_seconds: float = 0.5,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = httpx.Timeout(timeout_seconds)
        self.max_attempts = max(1, max_retries)
        self.backoff_seconds = backoff_seconds
        self._http = http_client

    def _url(self, filename: str) -> str:
        return f"{self.base_url}/{quote(filename, safe='')}"

    async def _send(
        self,
        operation: str,
        filename: str | None,
        request: Callable[[httpx.AsyncClient], Awaitable[httpx.Response]],
    ) -> httpx.Response:
        """Run request with retries; map failures to storage exceptions."""

        async def attempt() -> httpx.Response:
            if self._http is not None:
                response = await request(self._http)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await request(client)
            if response.status_code >= 500:
                raise _RetryableStatus(response.status_code)
            return response

        try:
            return await retry_async(
                attempt,
                max_attempts=self.max_attempts,
                backoff_seconds=self.backoff_seconds,
                retry_on=_RETRYABLE,
                description=f"Blob store {operation}",
            )
        except _RETRYABLE as e:
            raise StorageUnavailableError(operation, filename, str(e)) from e

    @staticmethod
    def _ensure_ok(
        response: httpx.Response, operation: str, filename: str | None
    ) -> None:
        if response.status_code == 404 and filename:
            raise StorageNotFoundError(filename)
        if response.status_code >= 400:
            raise StorageUnavailableError(
                operation, filename, f"HTTP {response.status_code}"
            )

    async def upload(self, filename: str, content: bytes, content_type: str) -> str:
        files = {"file": (filename, content, content_type)}
        response = await self._send(
            "upload",
            filename,
            lambda client: client.put(
                f"{self.base_url}/", files=files, timeout=self.timeout
            ),
        )
        self._ensure_ok(response, "upload", None)
        logger.debug("Uploaded %s (%d bytes)", filename, len(content))
        return filename

    async def download(self, filename: str) -> bytes:
        response = await self._send(
            "download",
            filename,
            lambda client: client.get(self._url(filename), timeout=self.timeout),
        )
        self._ensure_ok(response, "download", filename)
        return response.content

    async def delete(self, filename: str) -> bool:
        response = await self._send(
            "delete",
            filename,
            lambda client: client.delete(self._url(filename), timeout=self.timeout),
        )
        if response.status_code == 404:
            return False
        self._ensure_ok(response, "delete", filename)
        return True

    async def list_files(self, offset: int, limit: int) -> StoredFileList:
        params = {"offset": offset, "limit": limit}
        response = await self._send(
            "list",
            None,
            lambda client: client.get(
                f"{self.base_url}/files", params=params, timeout=self.timeout
            ),
        )
        self._ensure_ok(response, "list", None)
        try:
            body: dict[str, Any] = response.json()
        except ValueError as e:
            raise StorageUnavailableError("list", None, "invalid JSON body") from e
        files = body.get("files") or []
        return StoredFileList(items=list(files), count=int(body.get("total", len(files))))
