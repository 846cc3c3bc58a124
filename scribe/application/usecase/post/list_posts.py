"""List posts use case."""

import logfire
from pydantic import BaseModel, Field

from scribe.application.usecase.base import BaseUseCase
from scribe.application.usecase.views import PostView
from scribe.domain.service import PostService, UserService
from scribe.domain.value import UserId, parse_identifier


class ListPostsRequest(BaseModel):
    """List posts request."""

    author_id: str | None = None  # Only this author's posts
    limit: int = Field(default=30, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostView]


class ListPostsUseCase(BaseUseCase):
    """Use case for listing posts, newest first."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
            user_service: User domain service (author lookups)
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """List all posts, or one author's posts.

        Raises:
            InvalidIdentifierError: If the author id is not a UUID
            NotFoundError: If the author does not exist
        """
        with logfire.span(
            "list_posts.execute",
            author_id=request.author_id,
            limit=request.limit,
            offset=request.offset,
        ):
            if request.author_id is None:
                posts = await self.post_service.list_posts(
                    limit=request.limit, offset=request.offset
                )
            else:
                author_id = UserId(parse_identifier(request.author_id))
                await self.user_service.get_by_id(author_id)
                posts = await self.post_service.list_posts_by_author(
                    author_id, limit=request.limit, offset=request.offset
                )

            return ListPostsResponse(posts=[PostView.from_domain(p) for p in posts])
