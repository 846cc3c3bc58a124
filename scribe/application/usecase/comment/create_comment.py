"""Create comment use case."""

import logfire
from pydantic import BaseModel, Field

from scribe.application.usecase.base import BaseUseCase
from scribe.application.usecase.views import CommentView
from scribe.domain.error import NotFoundError
from scribe.domain.service import CommentService, PostService, UserService
from scribe.domain.value import PostId, UserId, parse_identifier


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str  # UUID string
    author_id: str  # User ID from authenticated user
    content: str = Field(min_length=1, max_length=10000)


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on a post."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CommentView:
        """Execute create comment flow.

        Steps:
        1. Check the post exists
        2. Load the author to copy their username
        3. Create and save the comment

        Raises:
            InvalidIdentifierError: If an id is not a UUID
            NotFoundError: If the post or the author does not exist
        """
        post_id = PostId(parse_identifier(request.post_id))
        author_id = UserId(parse_identifier(request.author_id))

        with logfire.span(
            "create_comment.execute", post_id=str(post_id), author_id=str(author_id)
        ):
            post = await self.post_service.get_post_by_id(post_id)
            if post is None:
                raise NotFoundError("Post", request.post_id)

            author = await self.user_service.get_by_id(author_id)
            comment = await self.comment_service.create_comment(
                post_id, author, request.content
            )
            return CommentView.from_domain(comment)
