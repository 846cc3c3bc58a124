"""In-memory comment repository for testing."""

from typing import Any, Optional

from scribe.domain.model import Comment, Reply
from scribe.domain.repository import CommentRepository
from scribe.domain.value import CommentId, PostId, ReplyId

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Replies are stored inside their comment.
    """

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._store.comments.get(comment_id)

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find all comments on a post, oldest first."""
        comments = [c for c in self._store.comments.values() if c.post_id == post_id]
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def save(self, comment: Comment) -> Comment:
        self._store.comments[comment.id] = comment
        return comment

    async def update_fields(
        self, comment_id: CommentId, fields: dict[str, Any]
    ) -> Optional[Comment]:
        comment = self._store.comments.get(comment_id)
        if comment is None:
            return None
        updated = comment.model_copy(update=fields)
        self._store.comments[comment_id] = updated
        return updated

    async def delete(self, comment_id: CommentId) -> bool:
        return self._store.comments.pop(comment_id, None) is not None

    async def add_reply(self, comment_id: CommentId, reply: Reply) -> bool:
        comment = self._store.comments.get(comment_id)
        if comment is None:
            return False
        self._store.comments[comment_id] = comment.model_copy(
            update={"replies": [*comment.replies, reply]}
        )
        return True

    async def update_reply_fields(
        self, comment_id: CommentId, reply_id: ReplyId, fields: dict[str, Any]
    ) -> Optional[Reply]:
        comment = self._store.comments.get(comment_id)
        reply = comment.find_reply(reply_id) if comment else None
        if reply is None:
            return None

        updated = reply.model_copy(update=fields)
        self._store.comments[comment_id] = comment.model_copy(
            update={
                "replies": [updated if r.id == reply_id else r for r in comment.replies]
            }
        )
        return updated

    async def delete_reply(self, comment_id: CommentId, reply_id: ReplyId) -> bool:
        comment = self._store.comments.get(comment_id)
        if comment is None or comment.find_reply(reply_id) is None:
            return False
        self._store.comments[comment_id] = comment.model_copy(
            update={"replies": [r for r in comment.replies if r.id != reply_id]}
        )
        return True
