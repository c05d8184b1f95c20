# app/storage.py
import logging
import time
import uuid
from typing import Optional

import boto3
from botocore.client import Config as BotoConfig
from botocore.exceptions import BotoCoreError, ClientError
from fastapi import Request

from app import settings
from app.errors import UpstreamError

log = logging.getLogger(__name__)


def object_key(filename: Optional[str], folder: str = settings.UPLOAD_FOLDER) -> str:
    """uploads/<epoch-ms>-<7 random chars>.<ext>; extension lowercased, 'bin' when missing."""
    name = filename or "upload.bin"
    ext = name.rsplit(".", 1)[1].lower() if "." in name else "bin"
    ext = ext or "bin"
    return f"{folder}/{int(time.time() * 1000)}-{uuid.uuid4().hex[:7]}.{ext}"


class BlobStore:
    """S3-compatible object store with public URL issuance."""

    def __init__(self, client, bucket: str, *, endpoint: str = "", region: str = "", assets_base: str = ""):
        self.client = client
        self.bucket = bucket
        self.endpoint = endpoint.rstrip("/")
        self.region = region
        self.assets_base = assets_base.rstrip("/")

    @classmethod
    def from_settings(cls) -> Optional["BlobStore"]:
        """None when the bucket is not configured; uploads then fail with a 502."""
        if not settings.S3_BUCKET:
            log.warning("S3_BUCKET not set, uploads disabled")
            return None
        client = boto3.client(
            "s3",
            region_name=settings.S3_REGION or None,
            endpoint_url=settings.S3_ENDPOINT or None,
            aws_access_key_id=settings.S3_ACCESS_KEY or None,
            aws_secret_access_key=settings.S3_SECRET_KEY or None,
            config=BotoConfig(s3={"addressing_style": "virtual"}),
        )
        return cls(
            client,
            settings.S3_BUCKET,
            endpoint=settings.S3_ENDPOINT,
            region=settings.S3_REGION,
            assets_base=settings.ASSETS_BASE_URL,
        )

    def store(self, data: bytes, content_type: Optional[str], filename: Optional[str] = None) -> str:
        """Upload bytes under a fresh key and return the key."""
        key = object_key(filename)
        try:
            self.client.put_object(
                Bucket=self.bucket,
                Key=key,
                Body=data,
                ContentType=content_type or "application/octet-stream",
                CacheControl="max-age=3600",
            )
        except (BotoCoreError, ClientError) as e:
            log.exception("blob upload failed: key=%s", key)
            raise UpstreamError(f"Upload failed: {e}") from e
        return key

    def public_url(self, key: str) -> str:
        key = key.lstrip("/")
        if self.assets_base:
            return f"{self.assets_base}/{key}"
        if self.endpoint:
            return f"{self.endpoint}/{self.bucket}/{key}"
        return f"https://{self.bucket}.s3.{self.region or 'us-east-1'}.amazonaws.com/{key}"


def get_blob_store(request: Request) -> BlobStore:
    store = getattr(request.app.state, "blob_store", None)
    if store is None:
        raise UpstreamError("Blob store not configured")
    return store
