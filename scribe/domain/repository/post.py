"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from scribe.domain.model.post import Post
from scribe.domain.value import PostId, UserId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, limit: int = 30, offset: int = 0) -> List[Post]:
        """List posts, newest first.

        Args:
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of posts
        """
        pass

    @abstractmethod
    async def find_by_author(
        self, author_id: UserId, limit: int = 30, offset: int = 0
    ) -> List[Post]:
        """List posts written by one author, newest first."""
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Insert a new post.

        Args:
            post: The post to insert

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def update_fields(
        self, post_id: PostId, fields: dict[str, Any]
    ) -> Optional[Post]:
        """Overwrite the given fields of a post.

        Returns:
            The updated post, or None if no post matched
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post.

        Comments on the post are left in place.

        Returns:
            True if a post was deleted
        """
        pass
