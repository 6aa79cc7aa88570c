from pathlib import Path

from moderation_gate.config.settings import Settings
from moderation_gate.storage.base import BaseStorage
from moderation_gate.storage.local_adapter import LocalStorage
from moderation_gate.storage.s3_adapter import S3Storage


class StorageFactory:
    """Creates the configured storage adapter.

    Credentials are only checked when the first blob is stored.
    """

    BACKENDS = ("s3", "local")

    @classmethod
    def create(cls, settings: Settings) -> BaseStorage:
        backend = settings.storage_backend.lower()
        if backend == "s3":
            return S3Storage(
                region=settings.aws_region,
                access_key_id=settings.aws_access_key_id,
                secret_access_key=settings.aws_secret_access_key,
            )
        if backend == "local":
            return LocalStorage(root=Path(settings.storage_local_root))
        raise ValueError(
            f"Unknown storage backend '{backend}'. Choose from: {list(cls.BACKENDS)}"
        )
