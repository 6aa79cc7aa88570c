import asyncio
import threading
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from moderation_gate.storage.base import BaseStorage
from moderation_gate.storage.exceptions import StorageConfigurationError, StorageError


class S3Storage(BaseStorage):
    """Stores blobs in Amazon S3 using boto3."""

    def __init__(
        self,
        *,
        region: str,
        access_key_id: str,
        secret_access_key: str,
    ) -> None:
        self._region = region
        self._access_key_id = access_key_id
        self._secret_access_key = secret_access_key
        self._client: Any = None
        self._client_lock = threading.Lock()
        self._client_lock = threading.Lock()

    async def put(
        self,
        bucket_id: str,
        object_key: str,
        data: bytes,
        content_type: str,
    ) -> str:
        if not bucket_id:
            raise StorageConfigurationError("STORAGE_BUCKET not configured")
        try:
            await asyncio.to_thread(self._upload, bucket_id, object_key, data, content_type)
        except (BotoCoreError, ClientError) as exc:
            raise StorageError(f"S3 upload of '{object_key}' failed: {exc}") from exc
        return self.location_for(bucket_id, object_key)

    def location_for(self, bucket_id: str, object_key: str) -> str:
        return f"https://{bucket_id}.s3.{self._region}.amazonaws.com/{object_key}"

    def backend_name(self) -> str:
        return "s3"

    def _upload(self, bucket_id: str, object_key: str, data: bytes, content_type: str) -> None:
        self._get_client().put_object(
            Bucket=bucket_id,
            Key=object_key,
            Body=data,
            ContentType=content_type,
        )

    def _get_client(self) -> Any:
        """Lazy-create and cache the S3 client. Runs on a worker thread."""
        with self._client_lock:
            if self._client is None:
                if not self._region:
                    raise StorageConfigurationError("AWS_REGION not configured")
                if not self._access_key_id or not self._secret_access_key:
                    raise StorageConfigurationError("AWS credentials not configured")
                self._client = boto3.client(
                    "s3",
                    region_name=self._region,
                    aws_access_key_id=self._access_key_id,
                    aws_secret_access_key=self._secret_access_key,
                )
            return self._client
