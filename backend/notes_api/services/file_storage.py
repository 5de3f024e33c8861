"""Blob directory for uploaded file bytes on the local filesystem."""
import logging
import os
import time
import uuid
from dataclasses import dataclass
from pathlib import Path

import aiofiles
from fastapi import Request

logger = logging.getLogger(__name__)


@dataclass
class StoredBlob:
    """Where an uploaded payload ended up on disk."""
    filename: str
    file_path: str
    file_size: int


def generate_blob_name(original_name: str) -> str:
    """Build a unique storage name, keeping the original extension.

    Format is ``{timestamp_ms}_{uuid4 hex}{ext}``.
    """
    ext = Path(original_name).suffix
    return f"{int(time.time() * 1000)}_{uuid.uuid4().hex}{ext}"


class FileStorageService:
    """Handles blob read/write/delete under a single uploads directory."""

    def __init__(self, base_path: str | Path):
        self.base_path = Path(base_path)
        self.base_path.mkdir(parents=True, exist_ok=True)

    async def save(self, file_bytes: bytes, original_name: str) -> StoredBlob:
        """Save file bytes under a freshly generated name."""
        filename = generate_blob_name(original_name)
        file_path = self.base_path / filename
        async with aiofiles.open(file_path, "wb") as f:
            await f.write(file_bytes)
        return StoredBlob(filename=filename, file_path=str(file_path), file_size=len(file_bytes))

    def exists(self, storage_path: str) -> bool:
        return Path(storage_path).is_file()

    async def delete(self, storage_path: str) -> bool:
        """Delete a blob. Returns False when it was already gone."""
        path = Path(storage_path)
        if not path.exists():
            logger.warning("Blob already missing: %s", storage_path)
            return False
        os.remove(path)
        return True


async def get_file_storage(request: Request) -> FileStorageService:
    """FastAPI dependency returning the storage built at startup."""
    return request.app.state.file_storage
