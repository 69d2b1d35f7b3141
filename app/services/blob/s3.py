"""S3-compatible blob store (AWS S3, Cloudflare R2, MinIO)."""

import asyncio
import logging
import uuid
from pathlib import PurePosixPath

import boto3
from botocore.client import Config
from botocore.exceptions import BotoCoreError, ClientError

from app.core.config import Settings
from app.core.exceptions import BlobStorageError
from app.services.blob.base import BlobStore

logger = logging.getLogger(__name__)

KEY_PREFIX = "job-portal"


class S3BlobStore(BlobStore):
    """Blob store backed by a boto3 S3 client.

    boto3 is blocking, so every call runs in a worker thread.
    """

    def __init__(self, client, bucket: str, public_base_url: str):
        self.client = client
        self.bucket = bucket
        self.public_base_url = public_base_url.rstrip("/")

    def _url_for(self, key: str) -> str:
        return f"{self.public_base_url}/{key}"

    def key_from_url(self, url: str) -> str | None:
        prefix = f"{self.public_base_url}/"
        if not url or not url.startswith(prefix):
            return None
        key = url[len(prefix):].split("?", 1)[0]
        return key or None

    async def upload(
        self, data: bytes, folder: str, filename: str, content_type: str
    ) -> str:
        suffix = PurePosixPath(filename or "").suffix.lower()
        key = f"{KEY_PREFIX}/{folder}/{uuid.uuid4().hex}{suffix}"
        try:
            await asyncio.to_thread(
                self.client.put_object,
                Bucket=self.bucket,
                Key=key,
                Body=data,
                ContentType=content_type,
            )
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Upload of {key} failed: {e}")
            raise BlobStorageError(str(e)) from e
        logger.info(f"Stored object {key} ({len(data)} bytes)")
        return self._url_for(key)

    async def delete(self, url: str) -> None:
        key = self.key_from_url(url)
        if key is None:
            logger.warning(f"Not deleting foreign object URL: {url}")
            return
        try:
            await asyncio.to_thread(
                self.client.delete_object, Bucket=self.bucket, Key=key
            )
        except (ClientError, BotoCoreError) as e:
            raise BlobStorageError(str(e)) from e
        logger.info(f"Deleted object {key}")


def create_blob_store(settings: Settings) -> S3BlobStore:
    """Build the configured S3 blob store."""
    client = boto3.client(
        "s3",
        endpoint_url=settings.s3_endpoint,
        aws_access_key_id=settings.s3_access_key,
        aws_secret_access_key=settings.s3_secret_key,
        region_name=settings.s3_region,
        config=Config(signature_version="s3v4"),
    )
    public_base_url = settings.s3_public_base_url
    if not public_base_url:
        endpoint = settings.s3_endpoint or f"https://{settings.s3_bucket}.s3.amazonaws.com"
        public_base_url = (
            f"{endpoint.rstrip('/')}/{settings.s3_bucket}"
            if settings.s3_endpoint
            else endpoint
        )
    return S3BlobStore(client, settings.s3_bucket, public_base_url)
