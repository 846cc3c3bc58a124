"""S3 avatar storage.

Uploads user avatars to an S3 (or S3-compatible) bucket and returns the
public URL of the stored object.
"""

import asyncio

import boto3
import logfire
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from scribe.adapter.error import UploadError
from scribe.config import StorageSettings


class AvatarStorage:
    """Stores avatar images.

    Provides type distinction for dependency injection.
    """

    async def upload(self, key: str, data: bytes, content_type: str) -> str:
        """Store an object and return its public URL.

        Args:
            key: Object key within the bucket
            data: Object bytes
            content_type: MIME type served with the object

        Raises:
            UploadError: If the store rejects the upload
        """
        raise NotImplementedError


class S3AvatarStorage(AvatarStorage):
    """boto3-backed avatar storage."""

    def __init__(self, settings: StorageSettings) -> None:
        """Initialize the S3 client.

        Credentials fall back to the default boto3 chain when not configured.

        Args:
            settings: Storage settings
        """
        self.settings = settings
        self.client = boto3.client(
            "s3",
            aws_access_key_id=settings.access_key_id,
            aws_secret_access_key=settings.secret_access_key,
            region_name=settings.region,
            endpoint_url=settings.endpoint_url,
            config=Config(signature_version="s3v4"),
        )

    def public_url(self, key: str) -> str:
        if self.settings.public_base_url:
            return f"{self.settings.public_base_url.rstrip('/')}/{key}"
        return (
            f"https://{self.settings.bucket}.s3.{self.settings.region}"
            f".amazonaws.com/{key}"
        )

    async def upload(self, key: str, data: bytes, content_type: str) -> str:
        with logfire.span(
            "s3.upload",
            bucket=self.settings.bucket,
            key=key,
            size=len(data),
            content_type=content_type,
        ):
            try:
                # boto3 is blocking; keep it off the event loop
                await asyncio.to_thread(
                    self.client.put_object,
                    Bucket=self.settings.bucket,
                    Key=key,
                    Body=data,
                    ContentType=content_type,
                )
            except (BotoCoreError, ClientError) as e:
                logfire.error("Avatar upload failed", key=key, error=str(e))
                raise UploadError("Failed to upload avatar", cause=type(e).__name__)

            url = self.public_url(key)
            logfire.info("Avatar uploaded", key=key, url=url)
            return url


class MockAvatarStorage(AvatarStorage):
    """In-memory avatar storage for testing."""

    def __init__(self, base_url: str = "https://avatars.test") -> None:
        self.base_url = base_url
        self.objects: dict[str, tuple[bytes, str]] = {}

    async def upload(self, key: str, data: bytes, content_type: str) -> str:
        self.objects[key] = (data, content_type)
        return f"{self.base_url}/{key}"
