"""PostgreSQL implementation of the reaction repository.

Each change is one conditional UPDATE. The membership guard sits in the
WHERE clause, so concurrent calls on the same row serialize on its row lock
and each re-checks the guard against the committed set.
"""

import logfire
from sqlalchemy import ARRAY, Table, all_, any_, func, literal, select, update
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from scribe.domain.model import ReactionLocation
from scribe.domain.repository import ReactionRepository
from scribe.domain.value import Direction, ReactableType, UserId
from scribe.persistence.errors import database_errors
from scribe.persistence.tables import comments_table, posts_table, replies_table

_TABLES: dict[ReactableType, Table] = {
    ReactableType.POST: posts_table,
    ReactableType.COMMENT: comments_table,
    ReactableType.REPLY: replies_table,
}


class PostgresReactionRepository(ReactionRepository):
    """PostgreSQL implementation of ReactionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _target(self, location: ReactionLocation) -> tuple[Table, list]:
        """Table and row filter for the entity a location points at."""
        table = _TABLES[location.entity]
        if location.entity == ReactableType.REPLY:
            return table, [
                table.c.comment_id == location.parent_id,
                table.c.id == location.target_id,
            ]
        return table, [table.c.id == location.target_id]

    async def apply(
        self, location: ReactionLocation, user_id: UserId, direction: Direction
    ) -> bool:
        table, filters = self._target(location)
        users_col = table.c[f"{location.kind.value}_users"]
        count_col = table.c[f"{location.kind.value}_count"]

        user = literal(user_id, type_=UUID(as_uuid=True))
        array_type = ARRAY(UUID(as_uuid=True))

        if direction == Direction.INCREASE:
            guard = user != all_(users_col)
            values = {
                users_col: func.array_append(users_col, user, type_=array_type),
                count_col: count_col + 1,
            }
        else:
            guard = user == any_(users_col)
            values = {
                users_col: func.array_remove(users_col, user, type_=array_type),
                count_col: count_col - 1,
            }

        stmt = (
            update(table)
            .where(*filters, guard)
            .values(values)
            .returning(table.c.id)
        )

        with logfire.span(
            "reaction_repository.apply",
            target=location.describe(),
            column=users_col.name,
            direction=direction.value,
        ):
            with database_errors("reaction.apply"):
                result = await self.session.execute(stmt)
                return result.first() is not None

    async def exists(self, location: ReactionLocation) -> bool:
        table, filters = self._target(location)
        with database_errors("reaction.exists"):
            result = await self.session.execute(select(table.c.id).where(*filters))
            return result.first() is not None
