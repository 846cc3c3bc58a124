"""Delete comment use case."""

from pydantic import BaseModel

from scribe.application.usecase.base import BaseUseCase
from scribe.domain.service import CommentService
from scribe.domain.value import CommentId, UserId, parse_identifier


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author)


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    status: str = "ok"


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting a comment with its replies."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Delete the comment. The post it belongs to is untouched.

        Raises:
            InvalidIdentifierError: If an id is not a UUID
            NotFoundError: If comment not found
            NotAuthorizedError: If user doesn't own the comment
        """
        await self.comment_service.delete_comment(
            CommentId(parse_identifier(request.comment_id)),
            UserId(parse_identifier(request.user_id)),
        )
        return DeleteCommentResponse()
