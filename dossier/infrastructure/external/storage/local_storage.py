"""Local filesystem blob storage with path validation and atomic writes.

Used for development and tests (STORAGE_BACKEND=local).
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

import aiofiles
import aiofiles.os

from dossier.application.dtos.document import StoredFileList
from dossier.infrastructure.exceptions import (
    StorageNotFoundError,
    StoragePermissionError,
    StorageUnavailableError,
)
from dossier.shared.utils.datetime import from_timestamp_utc


class LocalBlobStorage:
    """Flat directory of files named by attachment filename.

    Paths are validated against storage_root. Writes use temp file + rename,
    so a replaced attachment is never observed half-written.
    """

    CHUNK_SIZE = 64 * 1024  # 64KB

    def __init__(self, storage_root: str) -> None:
        self.storage_root = Path(storage_root).resolve()
        self.storage_root.mkdir(parents=True, exist_ok=True, mode=0o750)

    def _get_full_path(self, filename: str) -> Path:
        """Resolve and validate path under storage_root. Raises StoragePermissionError if traversal."""
        full_path = (self.storage_root / filename).resolve()
        if full_path.parent != self.storage_root:
            raise StoragePermissionError(filename, "path_validation")
        return full_path

    async def upload(self, filename: str, content: bytes, content_type: str) -> str:
        target_path = self._get_full_path(filename)
        try:
            temp_fd, temp_path = tempfile.mkstemp(
                dir=self.storage_root, prefix=".tmp_", suffix=target_path.suffix
            )
            os.close(temp_fd)
            try:
                async with aiofiles.open(temp_path, "wb") as f:
                    await f.write(content)
                os.chmod(temp_path, 0o640)
                os.replace(temp_path, target_path)
            finally:
                if Path(temp_path).exists():
                    os.unlink(temp_path)
        except OSError as e:
            raise StorageUnavailableError("upload", filename, str(e)) from e
        return filename

    async def download(self, filename: str) -> bytes:
        file_path = self._get_full_path(filename)
        if not file_path.exists():
            raise StorageNotFoundError(filename)
        try:
            async with aiofiles.open(file_path, "rb") as f:
                return await f.read()
        except OSError as e:
            raise StorageUnavailableError("download", filename, str(e)) from e

    async def delete(self, filename: str) -> bool:
        file_path = self._get_full_path(filename)
        if not file_path.exists():
            return False
        try:
            await aiofiles.os.remove(file_path)
        except OSError as e:
            raise StorageUnavailableError("delete", filename, str(e)) from e
        return True

    async def list_files(self, offset: int, limit: int) -> StoredFileList:
        entries = sorted(
            p for p in self.storage_root.iterdir()
            if p.is_file() and not p.name.startswith(".tmp_")
        )
        items = []
        for path in entries[offset : offset + limit]:
            stat = path.stat()
            items.append(
                {
                    "filename": path.name,
                    "size": stat.st_size,
                    "modified_at": from_timestamp_utc(stat.st_mtime).isoformat(),
                }
            )
        return StoredFileList(items=items, count=len(entries))
