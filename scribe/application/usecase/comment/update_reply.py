"""Update reply use case."""

from pydantic import BaseModel, Field

from scribe.application.usecase.base import BaseUseCase
from scribe.application.usecase.views import ReplyView
from scribe.domain.service import CommentService
from scribe.domain.value import CommentId, ReplyId, UserId, parse_identifier


class UpdateReplyRequest(BaseModel):
    """Update reply request."""

    comment_id: str  # UUID string
    reply_id: str  # UUID string
    user_id: str  # Current user ID (must be the reply's author)
    content: str = Field(min_length=1, max_length=10000)


class UpdateReplyUseCase(BaseUseCase):
    """Use case for editing one reply."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: UpdateReplyRequest) -> ReplyView:
        """Edit the reply addressed by (comment id, reply id).

        Raises:
            InvalidIdentifierError: If an id is not a UUID
            NotFoundError: If the comment or reply does not exist
            NotAuthorizedError: If user doesn't own the reply
        """
        reply = await self.comment_service.update_reply(
            CommentId(parse_identifier(request.comment_id)),
            ReplyId(parse_identifier(request.reply_id)),
            UserId(parse_identifier(request.user_id)),
            request.content,
        )
        return ReplyView.from_domain(reply)
