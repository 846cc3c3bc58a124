"""Comment domain service."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from scribe.domain.error import NotAuthorizedError, NotFoundError
from scribe.domain.model import Comment, Reply, User
from scribe.domain.repository import CommentRepository
from scribe.domain.value import CommentId, PostId, ReplyId, UserId

from .base import Service


class CommentService(Service):
    """Domain service for comments and their replies."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self, post_id: PostId, author: User, content: str
    ) -> Comment:
        """Create a comment on a post.

        The caller checks that the post exists.

        Args:
            post_id: Post ID
            author: Commenting user
            content: Comment text

        Returns:
            Saved comment
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author_id=str(author.id),
        ):
            now = datetime.now(timezone.utc)
            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                author_id=author.id,
                author_username=author.username,
                content=content,
                created_at=now,
                updated_at=now,
            )
            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created", comment_id=str(saved.id), post_id=str(post_id)
            )
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def get_comments_for_post(self, post_id: PostId) -> list[Comment]:
        with logfire.span(
            "comment_service.get_comments_for_post", post_id=str(post_id)
        ):
            comments = await self.comment_repository.find_by_post(post_id)
            logfire.info(
                "Comments loaded", post_id=str(post_id), count=len(comments)
            )
            return comments

    async def update_comment(
        self, comment_id: CommentId, user_id: UserId, content: str
    ) -> Comment:
        """Edit a comment's content.

        Raises:
            NotFoundError: If comment not found
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "comment_service.update_comment",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            comment = await self._get_owned(comment_id, user_id)
            changes = {"content": content, "updated_at": datetime.now(timezone.utc)}
            Comment.model_validate({**comment.model_dump(), **changes})

            updated = await self.comment_repository.update_fields(comment_id, changes)
            if updated is None:
                raise NotFoundError("Comment", str(comment_id))
            logfire.info("Comment updated", comment_id=str(comment_id))
            return updated

    async def delete_comment(self, comment_id: CommentId, user_id: UserId) -> None:
        """Delete a comment and its replies. The post is untouched.

        Raises:
            NotFoundError: If comment not found
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            await self._get_owned(comment_id, user_id)
            if not await self.comment_repository.delete(comment_id):
                raise NotFoundError("Comment", str(comment_id))
            logfire.info("Comment deleted", comment_id=str(comment_id))

    async def add_reply(
        self, comment_id: CommentId, author: User, content: str
    ) -> Reply:
        """Append a reply to a comment.

        Raises:
            NotFoundError: If comment not found
        """
        with logfire.span(
            "comment_service.add_reply",
            comment_id=str(comment_id),
            author_id=str(author.id),
        ):
            now = datetime.now(timezone.utc)
            reply = Reply(
                id=ReplyId(uuid4()),
                author_id=author.id,
                author_username=author.username,
                content=content,
                created_at=now,
                updated_at=now,
            )
            if not await self.comment_repository.add_reply(comment_id, reply):
                logfire.warn("Reply to missing comment", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            logfire.info(
                "Reply added", comment_id=str(comment_id), reply_id=str(reply.id)
            )
            return reply

    async def update_reply(
        self,
        comment_id: CommentId,
        reply_id: ReplyId,
        user_id: UserId,
        content: str,
    ) -> Reply:
        """Edit one reply.

        Raises:
            NotFoundError: If the comment or reply is not found
            NotAuthorizedError: If the user is not the reply's author
        """
        with logfire.span(
            "comment_service.update_reply",
            comment_id=str(comment_id),
            reply_id=str(reply_id),
        ):
            reply = await self._get_owned_reply(comment_id, reply_id, user_id)
            changes = {"content": content, "updated_at": datetime.now(timezone.utc)}
            Reply.model_validate({**reply.model_dump(), **changes})

            updated = await self.comment_repository.update_reply_fields(
                comment_id, reply_id, changes
            )
            if updated is None:
                raise NotFoundError("Reply", f"{comment_id}/{reply_id}")
            logfire.info("Reply updated", reply_id=str(reply_id))
            return updated

    async def delete_reply(
        self, comment_id: CommentId, reply_id: ReplyId, user_id: UserId
    ) -> None:
        """Remove one reply from its comment.

        Raises:
            NotFoundError: If the comment or reply is not found
            NotAuthorizedError: If the user is not the reply's author
        """
        with logfire.span(
            "comment_service.delete_reply",
            comment_id=str(comment_id),
            reply_id=str(reply_id),
        ):
            await self._get_owned_reply(comment_id, reply_id, user_id)
            if not await self.comment_repository.delete_reply(comment_id, reply_id):
                raise NotFoundError("Reply", f"{comment_id}/{reply_id}")
            logfire.info("Reply deleted", reply_id=str(reply_id))

    async def _get_owned(self, comment_id: CommentId, user_id: UserId) -> Comment:
        comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None:
            logfire.warn("Comment not found", comment_id=str(comment_id))
            raise NotFoundError("Comment", str(comment_id))
        if comment.author_id != user_id:
            raise NotAuthorizedError("comment", str(comment_id), str(user_id))
        return comment

    async def _get_owned_reply(
        self, comment_id: CommentId, reply_id: ReplyId, user_id: UserId
    ) -> Reply:
        comment = await self.comment_repository.find_by_id(comment_id)
        reply = comment.find_reply(reply_id) if comment else None
        if reply is None:
            logfire.warn(
                "Reply not found", comment_id=str(comment_id), reply_id=str(reply_id)
            )
            raise NotFoundError("Reply", f"{comment_id}/{reply_id}")
        if reply.author_id != user_id:
            raise NotAuthorizedError("reply", str(reply_id), str(user_id))
        return reply
