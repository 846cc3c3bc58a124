"""Create reply use case."""

import logfire
from pydantic import BaseModel, Field

from scribe.application.usecase.base import BaseUseCase
from scribe.application.usecase.views import ReplyView
from scribe.domain.service import CommentService, UserService
from scribe.domain.value import CommentId, UserId, parse_identifier


class CreateReplyRequest(BaseModel):
    """Create reply request."""

    comment_id: str  # UUID string
    author_id: str  # User ID from authenticated user
    content: str = Field(min_length=1, max_length=10000)


class CreateReplyUseCase(BaseUseCase):
    """Use case for appending a reply to a comment."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        """Initialize create reply use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: CreateReplyRequest) -> ReplyView:
        """Append the reply.

        Raises:
            InvalidIdentifierError: If an id is not a UUID
            NotFoundError: If the comment or the author does not exist
        """
        comment_id = CommentId(parse_identifier(request.comment_id))
        author_id = UserId(parse_identifier(request.author_id))

        with logfire.span(
            "create_reply.execute",
            comment_id=str(comment_id),
            author_id=str(author_id),
        ):
            author = await self.user_service.get_by_id(author_id)
            reply = await self.comment_service.add_reply(
                comment_id, author, request.content
            )
            return ReplyView.from_domain(reply)
