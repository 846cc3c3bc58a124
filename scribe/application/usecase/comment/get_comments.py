"""Get comments use case."""

from pydantic import BaseModel

from scribe.application.usecase.base import BaseUseCase
from scribe.application.usecase.views import CommentView
from scribe.domain.service import CommentService
from scribe.domain.value import PostId, parse_identifier


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: str  # UUID string


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    post_id: str
    comments: list[CommentView]
    total: int


class GetCommentsUseCase(BaseUseCase):
    """Use case for reading the comments on a post, oldest first.

    Comments outlive their post, so a missing post is not an error here.
    """

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        post_id = PostId(parse_identifier(request.post_id))
        comments = await self.comment_service.get_comments_for_post(post_id)
        return GetCommentsResponse(
            post_id=str(post_id),
            comments=[CommentView.from_domain(c) for c in comments],
            total=len(comments),
        )
