"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from scribe.domain.model.comment import Comment, Reply
from scribe.domain.value import CommentId, PostId, ReplyId


class CommentRepository(ABC):
    """Repository for comments and the replies they own.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID, replies included.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """List the comments on a post, oldest first, replies included.

        Args:
            post_id: The post ID

        Returns:
            List of comments
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        pass

    @abstractmethod
    async def update_fields(
        self, comment_id: CommentId, fields: dict[str, Any]
    ) -> Optional[Comment]:
        """Overwrite the given fields of a comment.

        Returns:
            The updated comment, or None if no comment matched
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment together with its replies.

        Returns:
            True if a comment was deleted
        """
        pass

    @abstractmethod
    async def add_reply(self, comment_id: CommentId, reply: Reply) -> bool:
        """Append a reply to a comment.

        Returns:
            True if the comment exists and the reply was stored
        """
        pass

    @abstractmethod
    async def update_reply_fields(
        self, comment_id: CommentId, reply_id: ReplyId, fields: dict[str, Any]
    ) -> Optional[Reply]:
        """Overwrite the given fields of one reply.

        Returns:
            The updated reply, or None if no reply matched
        """
        pass

    @abstractmethod
    async def delete_reply(self, comment_id: CommentId, reply_id: ReplyId) -> bool:
        """Remove one reply from a comment.

        Returns:
            True if a reply was deleted
        """
        pass
