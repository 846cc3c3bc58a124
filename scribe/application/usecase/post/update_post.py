"""Update post use case."""

from pydantic import BaseModel, Field

from scribe.application.usecase.base import BaseUseCase
from scribe.application.usecase.views import PostView
from scribe.domain.service import PostService
from scribe.domain.value import PostId, UserId, parse_identifier


class UpdatePostRequest(BaseModel):
    """Update post request."""

    post_id: str  # UUID string
    user_id: str  # Current user ID (must be author)
    title: str | None = Field(default=None, min_length=1, max_length=300)
    content: str | None = Field(default=None, min_length=1, max_length=50000)


class UpdatePostUseCase(BaseUseCase):
    """Use case for editing a post's title and content."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post service
        """
        self.post_service = post_service

    async def execute(self, request: UpdatePostRequest) -> PostView:
        """Execute update post flow.

        Raises:
            InvalidIdentifierError: If an id is not a UUID
            NotFoundError: If post not found
            NotAuthorizedError: If user doesn't own the post
        """
        post = await self.post_service.update_post(
            PostId(parse_identifier(request.post_id)),
            UserId(parse_identifier(request.user_id)),
            title=request.title,
            content=request.content,
        )
        return PostView.from_domain(post)
