"""Delete reply use case."""

from pydantic import BaseModel

from scribe.application.usecase.base import BaseUseCase
from scribe.domain.service import CommentService
from scribe.domain.value import CommentId, ReplyId, UserId, parse_identifier


class DeleteReplyRequest(BaseModel):
    """Delete reply request."""

    comment_id: str  # UUID string
    reply_id: str  # UUID string
    user_id: str  # Current user ID (must be the reply's author)


class DeleteReplyResponse(BaseModel):
    """Delete reply response."""

    status: str = "ok"


class DeleteReplyUseCase(BaseUseCase):
    """Use case for removing one reply from its comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteReplyRequest) -> DeleteReplyResponse:
        await self.comment_service.delete_reply(
            CommentId(parse_identifier(request.comment_id)),
            ReplyId(parse_identifier(request.reply_id)),
            UserId(parse_identifier(request.user_id)),
        )
        return DeleteReplyResponse()
