"""Get post use case."""

from pydantic import BaseModel

from scribe.application.usecase.base import BaseUseCase
from scribe.application.usecase.views import PostView
from scribe.domain.error import NotFoundError
from scribe.domain.service import PostService
from scribe.domain.value import PostId, parse_identifier


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str  # UUID string


class GetPostUseCase(BaseUseCase):
    """Use case for reading one post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> PostView:
        """Load a post.

        Raises:
            InvalidIdentifierError: If the id is not a UUID
            NotFoundError: If post not found
        """
        post_id = PostId(parse_identifier(request.post_id))
        post = await self.post_service.get_post_by_id(post_id)
        if post is None:
            raise NotFoundError("Post", request.post_id)
        return PostView.from_domain(post)
