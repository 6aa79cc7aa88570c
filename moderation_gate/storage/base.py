from abc import ABC, abstractmethod


class BaseStorage(ABC):
    """Contract for durable blob storage adapters."""

    @abstractmethod
    async def put(
        self,
        bucket_id: str,
        object_key: str,
        data: bytes,
        content_type: str,
    ) -> str:
        """Persist a named binary blob.

        Args:
            bucket_id: Target bucket (or container) identifier.
            object_key: Unique object name within the bucket.
            data: Blob content.
            content_type: MIME type stored with the object.

        Returns:
            Location of the stored object.

        Raises:
            StorageError: on any failure, including missing configuration.
        """

    @abstractmethod
    def backend_name(self) -> str:
        """Return backend identifier."""
