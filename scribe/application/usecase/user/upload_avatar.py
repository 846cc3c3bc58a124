"""Upload avatar use case."""

import logfire
from pydantic import BaseModel

from scribe.adapter.storage import AvatarStorage
from scribe.application.usecase.base import BaseUseCase
from scribe.application.usecase.views import ProfileView
from scribe.domain.error import ValidationError
from scribe.domain.service import UserService
from scribe.domain.value import UserId, parse_identifier

# Accepted image types and the extension stored with them
IMAGE_EXTENSIONS = {
    "image/jpeg": "jpg",
    "image/png": "png",
    "image/gif": "gif",
    "image/webp": "webp",
}
MAX_AVATAR_BYTES = 5 * 1024 * 1024


class UploadAvatarRequest(BaseModel):
    """Upload avatar request."""

    user_id: str  # User ID from authenticated user
    content_type: str
    data: bytes


class UploadAvatarUseCase(BaseUseCase):
    """Use case for replacing a user's avatar image."""

    def __init__(self, user_service: UserService, storage: AvatarStorage) -> None:
        """Initialize upload avatar use case.

        Args:
            user_service: User domain service
            storage: Avatar object storage
        """
        self.user_service = user_service
        self.storage = storage

    async def execute(self, request: UploadAvatarRequest) -> ProfileView:
        """Store the image as ``avatars/<user_id>.<ext>`` and record its URL.

        Raises:
            ValidationError: If the file is not a supported image or too large
            NotFoundError: If user not found
            UploadError: If the storage upload fails
        """
        user_id = UserId(parse_identifier(request.user_id))

        extension = IMAGE_EXTENSIONS.get(request.content_type)
        if extension is None:
            raise ValidationError(
                f"Unsupported avatar type: {request.content_type}"
            )
        if not request.data:
            raise ValidationError("Avatar file is empty")
        if len(request.data) > MAX_AVATAR_BYTES:
            raise ValidationError("Avatar file is larger than 5 MB")

        with logfire.span(
            "upload_avatar.execute", user_id=str(user_id), size=len(request.data)
        ):
            # Fail before uploading if the account is gone
            await self.user_service.get_by_id(user_id)

            url = await self.storage.upload(
                f"avatars/{user_id}.{extension}", request.data, request.content_type
            )
            user = await self.user_service.set_avatar_url(user_id, url)
            return ProfileView.from_domain(user)
