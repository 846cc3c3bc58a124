"""PostgreSQL implementation of User repository."""

from typing import Any, List, Optional

import logfire
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from scribe.domain.error import AlreadyExistsError
from scribe.domain.model import User
from scribe.domain.repository import UserRepository
from scribe.domain.value import Email, UserId, Username
from scribe.persistence.errors import database_errors
from scribe.persistence.mappers import row_to_user, user_to_dict
from scribe.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        return await self._fetch_one(stmt, "user.find_by_id")

    async def find_by_username(self, username: Username) -> Optional[User]:
        stmt = select(users_table).where(users_table.c.username == username.root)
        return await self._fetch_one(stmt, "user.find_by_username")

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by email.

        Emails are stored lowercase, so an exact match is case-insensitive.
        """
        stmt = select(users_table).where(users_table.c.email == email.root)
        return await self._fetch_one(stmt, "user.find_by_email")

    async def find_all(self, limit: int = 50, offset: int = 0) -> List[User]:
        stmt = (
            select(users_table)
            .order_by(users_table.c.created_at, users_table.c.id)
            .limit(limit)
            .offset(offset)
        )
        with database_errors("user.find_all"):
            result = await self.session.execute(stmt)
            return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def save(self, user: User) -> User:
        """Insert a user.

        Args:
            user: User to save

        Returns:
            Saved user

        Raises:
            AlreadyExistsError: If a concurrent insert took the username or email
        """
        stmt = users_table.insert().values(**user_to_dict(user))
        with database_errors("user.save"):
            try:
                await self.session.execute(stmt)
                await self.session.flush()
            except IntegrityError as e:
                field = "email" if "email" in str(e.orig) else "username"
                logfire.warn("User unique constraint violated", field=field)
                raise AlreadyExistsError(
                    "User", field, getattr(user, field).root
                ) from e
        return user

    async def update_fields(
        self, user_id: UserId, fields: dict[str, Any]
    ) -> Optional[User]:
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .values(**fields)
            .returning(*users_table.c)
        )
        with database_errors("user.update_fields"):
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            return row_to_user(dict(row)) if row else None

    async def _fetch_one(self, stmt, operation: str) -> Optional[User]:
        with database_errors(operation):
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            return row_to_user(dict(row)) if row else None
