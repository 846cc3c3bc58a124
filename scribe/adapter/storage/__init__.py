"""Avatar object storage."""

from .s3 import AvatarStorage, MockAvatarStorage, S3AvatarStorage

__all__ = ["AvatarStorage", "MockAvatarStorage", "S3AvatarStorage"]
