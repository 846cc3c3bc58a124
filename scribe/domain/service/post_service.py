"""Post domain service."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from scribe.domain.error import NotAuthorizedError, NotFoundError
from scribe.domain.model import Post, User
from scribe.domain.repository import PostRepository
from scribe.domain.value import PostId, UserId

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def create_post(self, author: User, title: str, content: str) -> Post:
        """Create a post authored by ``author``.

        Args:
            author: The writing user
            title: Post title
            content: Post body

        Returns:
            Saved post
        """
        with logfire.span(
            "post_service.create_post", author_id=str(author.id), title=title
        ):
            now = datetime.now(timezone.utc)
            post = Post(
                id=PostId(uuid4()),
                title=title,
                content=content,
                author_id=author.id,
                author_username=author.username,
                created_at=now,
                updated_at=now,
            )
            saved = await self.post_repository.save(post)
            logfire.info("Post saved", post_id=str(saved.id))
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=str(post_id), title=post.title)
            else:
                logfire.warn("Post not found", post_id=str(post_id))

            return post

    async def list_posts(self, limit: int = 30, offset: int = 0) -> list[Post]:
        with logfire.span("post_service.list_posts", limit=limit, offset=offset):
            return await self.post_repository.find_all(limit=limit, offset=offset)

    async def list_posts_by_author(
        self, author_id: UserId, limit: int = 30, offset: int = 0
    ) -> list[Post]:
        with logfire.span(
            "post_service.list_posts_by_author", author_id=str(author_id)
        ):
            return await self.post_repository.find_by_author(
                author_id, limit=limit, offset=offset
            )

    async def update_post(
        self,
        post_id: PostId,
        user_id: UserId,
        title: str | None = None,
        content: str | None = None,
    ) -> Post:
        """Edit a post's title and/or content.

        Args:
            post_id: Post ID
            user_id: Editing user (must be the author)
            title: New title, or None to keep it
            content: New content, or None to keep it

        Returns:
            Updated post

        Raises:
            NotFoundError: If post not found
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "post_service.update_post", post_id=str(post_id), user_id=str(user_id)
        ):
            post = await self._get_owned(post_id, user_id)

            # Validate through the model before touching the store
            changes = {"updated_at": datetime.now(timezone.utc)}
            if title is not None:
                changes["title"] = title
            if content is not None:
                changes["content"] = content
            Post.model_validate({**post.model_dump(), **changes})

            updated = await self.post_repository.update_fields(post_id, changes)
            if updated is None:
                raise NotFoundError("Post", str(post_id))

            logfire.info("Post updated", post_id=str(post_id))
            return updated

    async def delete_post(self, post_id: PostId, user_id: UserId) -> None:
        """Delete a post. Its comments are kept.

        Raises:
            NotFoundError: If post not found
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "post_service.delete_post", post_id=str(post_id), user_id=str(user_id)
        ):
            await self._get_owned(post_id, user_id)
            if not await self.post_repository.delete(post_id):
                raise NotFoundError("Post", str(post_id))
            logfire.info("Post deleted", post_id=str(post_id))

    async def _get_owned(self, post_id: PostId, user_id: UserId) -> Post:
        post = await self.post_repository.find_by_id(post_id)
        if post is None:
            logfire.warn("Post not found", post_id=str(post_id))
            raise NotFoundError("Post", str(post_id))
        if post.author_id != user_id:
            logfire.warn(
                "Post modification by non-author",
                post_id=str(post_id),
                user_id=str(user_id),
            )
            raise NotAuthorizedError("post", str(post_id), str(user_id))
        return post
