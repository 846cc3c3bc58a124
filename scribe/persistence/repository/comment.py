"""PostgreSQL implementation of Comment repository.

Comments live in ``comments``; their replies live in ``replies`` keyed by
(comment_id, id) and are removed with the comment by ``ON DELETE CASCADE``.
"""

from collections import defaultdict
from typing import Any, List, Optional
from uuid import UUID

import logfire
from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from scribe.domain.model import Comment, Reply
from scribe.domain.repository import CommentRepository
from scribe.domain.value import CommentId, PostId, ReplyId
from scribe.persistence.errors import database_errors
from scribe.persistence.mappers import (
    comment_to_dict,
    reply_to_dict,
    row_to_comment,
    row_to_reply,
)
from scribe.persistence.tables import comments_table, replies_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_replies(
        self, comment_ids: list[UUID]
    ) -> dict[UUID, list[Reply]]:
        """Fetch replies for multiple comments in a single query.

        Args:
            comment_ids: List of comment IDs

        Returns:
            Dict mapping comment_id -> replies in creation order
        """
        if not comment_ids:
            return {}

        stmt = (
            select(replies_table)
            .where(replies_table.c.comment_id.in_(comment_ids))
            .order_by(replies_table.c.created_at, replies_table.c.id)
        )
        result = await self.session.execute(stmt)

        replies: dict[UUID, list[Reply]] = defaultdict(list)
        for row in result.mappings().all():
            replies[row["comment_id"]].append(row_to_reply(dict(row)))
        return replies

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID, with its replies."""
        with logfire.span(
            "comment_repository.find_by_id", comment_id=str(comment_id)
        ):
            stmt = select(comments_table).where(comments_table.c.id == comment_id)
            with database_errors("comment.find_by_id"):
                result = await self.session.execute(stmt)
                row = result.mappings().first()
                if not row:
                    return None
                replies = await self._fetch_replies([comment_id])
            return row_to_comment(dict(row), replies.get(comment_id, []))

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments on a post, oldest first."""
        with logfire.span("comment_repository.find_by_post", post_id=str(post_id)):
            stmt = (
                select(comments_table)
                .where(comments_table.c.post_id == post_id)
                .order_by(comments_table.c.created_at, comments_table.c.id)
            )
            with database_errors("comment.find_by_post"):
                result = await self.session.execute(stmt)
                rows = [dict(row) for row in result.mappings().all()]
                replies = await self._fetch_replies([row["id"] for row in rows])
            return [row_to_comment(row, replies.get(row["id"], [])) for row in rows]

    async def save(self, comment: Comment) -> Comment:
        """Insert a comment and any replies it already carries."""
        with logfire.span("comment_repository.save", comment_id=str(comment.id)):
            with database_errors("comment.save"):
                await self.session.execute(
                    insert(comments_table).values(**comment_to_dict(comment))
                )
                for reply in comment.replies:
                    await self.session.execute(
                        insert(replies_table).values(**reply_to_dict(comment.id, reply))
                    )
                await self.session.flush()
            return comment

    async def update_fields(
        self, comment_id: CommentId, fields: dict[str, Any]
    ) -> Optional[Comment]:
        with logfire.span(
            "comment_repository.update_fields",
            comment_id=str(comment_id),
            fields=sorted(fields),
        ):
            stmt = (
                update(comments_table)
                .where(comments_table.c.id == comment_id)
                .values(**fields)
                .returning(comments_table.c.id)
            )
            with database_errors("comment.update_fields"):
                result = await self.session.execute(stmt)
                if result.first() is None:
                    return None
            return await self.find_by_id(comment_id)

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment; its replies go with it."""
        with logfire.span("comment_repository.delete", comment_id=str(comment_id)):
            stmt = (
                delete(comments_table)
                .where(comments_table.c.id == comment_id)
                .returning(comments_table.c.id)
            )
            with database_errors("comment.delete"):
                result = await self.session.execute(stmt)
                return result.first() is not None

    async def add_reply(self, comment_id: CommentId, reply: Reply) -> bool:
        """Append a reply if the comment exists."""
        with logfire.span(
            "comment_repository.add_reply",
            comment_id=str(comment_id),
            reply_id=str(reply.id),
        ):
            with database_errors("comment.add_reply"):
                # Lock the parent row so a concurrent delete cannot orphan the reply
                exists = await self.session.execute(
                    select(comments_table.c.id)
                    .where(comments_table.c.id == comment_id)
                    .with_for_update()
                )
                if exists.first() is None:
                    return False
                await self.session.execute(
                    insert(replies_table).values(**reply_to_dict(comment_id, reply))
                )
                await self.session.flush()
            return True

    async def update_reply_fields(
        self, comment_id: CommentId, reply_id: ReplyId, fields: dict[str, Any]
    ) -> Optional[Reply]:
        with logfire.span(
            "comment_repository.update_reply_fields",
            comment_id=str(comment_id),
            reply_id=str(reply_id),
        ):
            stmt = (
                update(replies_table)
                .where(
                    replies_table.c.comment_id == comment_id,
                    replies_table.c.id == reply_id,
                )
                .values(**fields)
                .returning(*replies_table.c)
            )
            with database_errors("comment.update_reply_fields"):
                result = await self.session.execute(stmt)
                row = result.mappings().first()
            return row_to_reply(dict(row)) if row else None

    async def delete_reply(self, comment_id: CommentId, reply_id: ReplyId) -> bool:
        with logfire.span(
            "comment_repository.delete_reply",
            comment_id=str(comment_id),
            reply_id=str(reply_id),
        ):
            stmt = (
                delete(replies_table)
                .where(
                    replies_table.c.comment_id == comment_id,
                    replies_table.c.id == reply_id,
                )
                .returning(replies_table.c.id)
            )
            with database_errors("comment.delete_reply"):
                result = await self.session.execute(stmt)
                return result.first() is not None
