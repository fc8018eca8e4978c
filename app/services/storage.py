"""
Object storage drivers for gallery media.

Both drivers expose the same surface: ``put``, ``read``, ``delete``,
``exists`` and ``signed_url``. Keys are flat filenames produced by the
compressor; records keep the key, never a URL.
"""

import logging
from functools import lru_cache
from pathlib import Path

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from app.config import settings
from app.core.exceptions import NotFound, StorageError
from app.services.signing import signed_media_url

logger = logging.getLogger(__name__)


class LocalStorage:
    """Filesystem-backed store; URLs are HMAC-signed and served by /media."""

    driver = "local"

    def __init__(self, base_dir: str | Path | None = None, base_url: str | None = None):
        self.base = Path(base_dir or settings.STORAGE_DIR).resolve()
        self.base.mkdir(parents=True, exist_ok=True)
        self.base_url = base_url

    def _path(self, key: str) -> Path:
        path = (self.base / key).resolve()
        if path.parent != self.base:
            raise NotFound("Object not found")
        return path

    def put(self, key: str, data: bytes, content_type: str | None = None) -> str:
        try:
            with open(self._path(key), "wb") as f:
                f.write(data)
        except OSError as exc:
            raise StorageError(details={"key": key, "cause": str(exc)}) from exc
        logger.info("Stored object %s (%d bytes)", key, len(data))
        return key

    def read(self, key: str) -> bytes:
        path = self._path(key)
        if not path.exists():
            raise NotFound("Object not found")
        return path.read_bytes()

    def exists(self, key: str) -> bool:
        try:
            return self._path(key).exists()
        except NotFound:
            return False

    def delete(self, key: str) -> None:
        try:
            self._path(key).unlink(missing_ok=True)
        except OSError as exc:
            raise StorageError(details={"key": key, "cause": str(exc)}) from exc
        logger.info("Deleted object %s", key)

    def signed_url(self, key: str, expires_s: int | None = None) -> str:
        return signed_media_url(
            key,
            expires_s=expires_s or settings.SIGNED_URL_EXPIRES_S,
            base_url=self.base_url,
        )


class S3Storage:
    """AWS S3 bucket; URLs are presigned GetObject requests."""

    driver = "s3"

    def __init__(self, bucket: str | None = None, client=None):
        self.bucket = bucket or settings.AWS_BUCKET_NAME
        if not self.bucket:
            raise ValueError("AWS_BUCKET_NAME must be set for the s3 storage driver")
        self.client = client or boto3.client(
            "s3",
            region_name=settings.AWS_BUCKET_REGION,
            aws_access_key_id=settings.AWS_ACCESS_KEY or None,
            aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY or None,
            config=Config(signature_version="s3v4"),
        )

    def put(self, key: str, data: bytes, content_type: str | None = None) -> str:
        params = {"Bucket": self.bucket, "Key": key, "Body": data}
        if content_type:
            params["ContentType"] = content_type
        try:
            self.client.put_object(**params)
        except (BotoCoreError, ClientError) as exc:
            raise StorageError(details={"key": key, "cause": str(exc)}) from exc
        logger.info("Stored object s3://%s/%s (%d bytes)", self.bucket, key, len(data))
        return key

    def read(self, key: str) -> bytes:
        try:
            resp = self.client.get_object(Bucket=self.bucket, Key=key)
        except ClientError as exc:
            if exc.response.get("Error", {}).get("Code") in ("NoSuchKey", "404"):
                raise NotFound("Object not found") from exc
            raise StorageError(details={"key": key, "cause": str(exc)}) from exc
        return resp["Body"].read()

    def exists(self, key: str) -> bool:
        try:
            self.client.head_object(Bucket=self.bucket, Key=key)
            return True
        except ClientError as exc:
            if exc.response.get("Error", {}).get("Code") in ("NoSuchKey", "404", "NotFound"):
                return False
            raise StorageError(details={"key": key, "cause": str(exc)}) from exc

    def delete(self, key: str) -> None:
        try:
            self.client.delete_object(Bucket=self.bucket, Key=key)
        except (BotoCoreError, ClientError) as exc:
            raise StorageError(details={"key": key, "cause": str(exc)}) from exc
        logger.info("Deleted object s3://%s/%s", self.bucket, key)

    def signed_url(self, key: str, expires_s: int | None = None) -> str:
        try:
            return self.client.generate_presigned_url(
                "get_object",
                Params={"Bucket": self.bucket, "Key": key},
                ExpiresIn=expires_s or settings.SIGNED_URL_EXPIRES_S,
            )
        except (BotoCoreError, ClientError) as exc:
            raise StorageError(details={"key": key, "cause": str(exc)}) from exc


def build_storage(driver: str | None = None):
    driver = (driver or settings.STORAGE_DRIVER or "local").strip().lower()
    if driver == "s3":
        return S3Storage()
    if driver == "local":
        return LocalStorage()
    raise ValueError(f"Unknown STORAGE_DRIVER {driver!r}")


@lru_cache(maxsize=1)
def get_storage():
    """FastAPI dependency returning the configured storage driver."""
    return build_storage()
