"""Delete post use case."""

from pydantic import BaseModel

from scribe.application.usecase.base import BaseUseCase
from scribe.domain.service import PostService
from scribe.domain.value import PostId, UserId, parse_identifier


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str  # UUID string
    user_id: str  # Current user ID (must be author)


class DeletePostResponse(BaseModel):
    """Delete post response."""

    status: str = "ok"


class DeletePostUseCase(BaseUseCase):
    """Use case for deleting a post.

    The post's comments are not removed.
    """

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Delete the post.

        Raises:
            InvalidIdentifierError: If an id is not a UUID
            NotFoundError: If post not found
            NotAuthorizedError: If user doesn't own the post
        """
        await self.post_service.delete_post(
            PostId(parse_identifier(request.post_id)),
            UserId(parse_identifier(request.user_id)),
        )
        return DeletePostResponse()
