"""Update comment use case."""

from pydantic import BaseModel, Field

from scribe.application.usecase.base import BaseUseCase
from scribe.application.usecase.views import CommentView
from scribe.domain.service import CommentService
from scribe.domain.value import CommentId, UserId, parse_identifier


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author)
    content: str = Field(min_length=1, max_length=10000)


class UpdateCommentUseCase(BaseUseCase):
    """Use case for editing a comment's content."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment service
        """
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> CommentView:
        """Execute update comment flow.

        Raises:
            InvalidIdentifierError: If an id is not a UUID
            NotFoundError: If comment not found
            NotAuthorizedError: If user doesn't own the comment
        """
        comment = await self.comment_service.update_comment(
            CommentId(parse_identifier(request.comment_id)),
            UserId(parse_identifier(request.user_id)),
            request.content,
        )
        return CommentView.from_domain(comment)
