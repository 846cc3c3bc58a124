"""In-memory user repository for testing."""

from typing import Any, Optional

from scribe.domain.error import AlreadyExistsError
from scribe.domain.model import User
from scribe.domain.repository import UserRepository
from scribe.domain.value import Email, UserId, Username

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self._store.users.get(user_id)

    async def find_by_username(self, username: Username) -> Optional[User]:
        return next(
            (u for u in self._store.users.values() if u.username == username), None
        )

    async def find_by_email(self, email: Email) -> Optional[User]:
        return next((u for u in self._store.users.values() if u.email == email), None)

    async def find_all(self, limit: int = 50, offset: int = 0) -> list[User]:
        users = sorted(self._store.users.values(), key=lambda u: u.created_at)
        return users[offset : offset + limit]

    async def save(self, user: User) -> User:
        """Insert a user, enforcing the unique username and email."""
        for existing in self._store.users.values():
            if existing.username == user.username:
                raise AlreadyExistsError("User", "username", user.username.root)
            if existing.email == user.email:
                raise AlreadyExistsError("User", "email", user.email.root)
        self._store.users[user.id] = user
        return user

    async def update_fields(
        self, user_id: UserId, fields: dict[str, Any]
    ) -> Optional[User]:
        user = self._store.users.get(user_id)
        if user is None:
            return None
        updated = user.model_copy(update=fields)
        self._store.users[user_id] = updated
        return updated
