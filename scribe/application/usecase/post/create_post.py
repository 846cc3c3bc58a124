"""Create post use case."""

import logfire
from pydantic import BaseModel, Field

from scribe.application.usecase.base import BaseUseCase
from scribe.application.usecase.views import PostView
from scribe.domain.service import PostService, UserService
from scribe.domain.value import UserId, parse_identifier


class CreatePostRequest(BaseModel):
    """Create post request."""

    author_id: str  # User ID from authenticated user
    title: str = Field(min_length=1, max_length=300)
    content: str = Field(min_length=1, max_length=50000)


class CreatePostUseCase(BaseUseCase):
    """Use case for creating a new post."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: CreatePostRequest) -> PostView:
        """Execute create post flow.

        Steps:
        1. Load the author to copy their username onto the post
        2. Create and save the post

        Raises:
            NotFoundError: If the author no longer exists
        """
        author_id = UserId(parse_identifier(request.author_id))
        author = await self.user_service.get_by_id(author_id)

        with logfire.span(
            "create_post.execute", title=request.title, author=author.username.root
        ):
            post = await self.post_service.create_post(
                author, request.title, request.content
            )
            logfire.info("Post created successfully", post_id=str(post.id))
            return PostView.from_domain(post)
