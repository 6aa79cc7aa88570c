import asyncio
import re
from pathlib import Path

from moderation_gate.storage.base import BaseStorage
from moderation_gate.storage.exceptions import StorageConfigurationError, StorageError


class LocalStorage(BaseStorage):
    """Stores blobs on the local filesystem under ``<root>/<bucket>/<key>``."""

    def __init__(self, root: Path) -> None:
        self._root = root

    async def put(
        self,
        bucket_id: str,
        object_key: str,
        data: bytes,
        content_type: str,
    ) -> str:
        if not bucket_id:
            raise StorageConfigurationError("STORAGE_BUCKET not configured")
        target = self._root / self._sanitize(bucket_id) / self._sanitize(object_key)
        try:
            await asyncio.to_thread(self._write, target, data)
        except OSError as exc:
            raise StorageError(f"local write of '{object_key}' failed: {exc}") from exc
        return target.resolve().as_uri()

    def backend_name(self) -> str:
        return "local"

    @staticmethod
    def _write(target: Path, data: bytes) -> None:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)

    @staticmethod
    def _sanitize(name: str) -> str:
        """Remove path traversal and dangerous characters."""
        safe = name.replace("../", "").replace("..\\", "")
        safe = safe.replace("/", "_").replace("\\", "_")
        safe = re.sub(r"[^a-zA-Z0-9._-]", "_", safe)[:255]
        if not safe.strip("."):
            raise StorageError(f"invalid storage name '{name}'")
        return safe
