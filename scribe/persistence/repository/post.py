"""PostgreSQL implementation of Post repository."""

from typing import Any, List, Optional

import logfire
from sqlalchemy import delete, desc, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from scribe.domain.model import Post
from scribe.domain.repository import PostRepository
from scribe.domain.value import PostId, UserId
from scribe.persistence.errors import database_errors
from scribe.persistence.mappers import post_to_dict, row_to_post
from scribe.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            with database_errors("post.find_by_id"):
                result = await self.session.execute(stmt)
                row = result.mappings().first()
            return row_to_post(dict(row)) if row else None

    async def find_all(self, limit: int = 30, offset: int = 0) -> List[Post]:
        """Find posts, newest first."""
        with logfire.span("post_repository.find_all", limit=limit, offset=offset):
            stmt = (
                select(posts_table)
                .order_by(desc(posts_table.c.created_at), desc(posts_table.c.id))
                .limit(limit)
                .offset(offset)
            )
            return await self._fetch_all(stmt, "post.find_all")

    async def find_by_author(
        self, author_id: UserId, limit: int = 30, offset: int = 0
    ) -> List[Post]:
        """Find posts by one author, newest first."""
        with logfire.span(
            "post_repository.find_by_author", author_id=str(author_id)
        ):
            stmt = (
                select(posts_table)
                .where(posts_table.c.author_id == author_id)
                .order_by(desc(posts_table.c.created_at), desc(posts_table.c.id))
                .limit(limit)
                .offset(offset)
            )
            return await self._fetch_all(stmt, "post.find_by_author")

    async def save(self, post: Post) -> Post:
        """Insert a post."""
        with logfire.span("post_repository.save", post_id=str(post.id)):
            stmt = insert(posts_table).values(**post_to_dict(post))
            with database_errors("post.save"):
                await self.session.execute(stmt)
                await self.session.flush()
            return post

    async def update_fields(
        self, post_id: PostId, fields: dict[str, Any]
    ) -> Optional[Post]:
        """Overwrite the given columns and return the updated post."""
        with logfire.span(
            "post_repository.update_fields",
            post_id=str(post_id),
            fields=sorted(fields),
        ):
            stmt = (
                update(posts_table)
                .where(posts_table.c.id == post_id)
                .values(**fields)
                .returning(*posts_table.c)
            )
            with database_errors("post.update_fields"):
                result = await self.session.execute(stmt)
                row = result.mappings().first()
            return row_to_post(dict(row)) if row else None

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post. Comments stay where they are."""
        with logfire.span("post_repository.delete", post_id=str(post_id)):
            stmt = (
                delete(posts_table)
                .where(posts_table.c.id == post_id)
                .returning(posts_table.c.id)
            )
            with database_errors("post.delete"):
                result = await self.session.execute(stmt)
                return result.first() is not None

    async def _fetch_all(self, stmt, operation: str) -> List[Post]:
        with database_errors(operation):
            result = await self.session.execute(stmt)
            return [row_to_post(dict(row)) for row in result.mappings().all()]
