"""In-memory reaction repository for testing."""

from typing import Optional

from pydantic import BaseModel

from scribe.domain.model import ReactionLocation, ReactionSet
from scribe.domain.repository import ReactionRepository
from scribe.domain.value import Direction, ReactableType, UserId

from .store import InMemoryStore


class InMemoryReactionRepository(ReactionRepository):
    """In-memory implementation of ReactionRepository for testing.

    Reads the target, checks the guard and writes the new set without
    awaiting in between, so each call is atomic on the event loop.
    """

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    def _find(self, location: ReactionLocation) -> Optional[BaseModel]:
        if location.entity == ReactableType.POST:
            return self._store.posts.get(location.target_id)
        if location.entity == ReactableType.COMMENT:
            return self._store.comments.get(location.target_id)
        comment = self._store.comments.get(location.parent_id)
        return comment.find_reply(location.target_id) if comment else None

    def _store_entity(self, location: ReactionLocation, entity: BaseModel) -> None:
        if location.entity == ReactableType.POST:
            self._store.posts[location.target_id] = entity
        elif location.entity == ReactableType.COMMENT:
            self._store.comments[location.target_id] = entity
        else:
            comment = self._store.comments[location.parent_id]
            self._store.comments[location.parent_id] = comment.model_copy(
                update={
                    "replies": [
                        entity if r.id == location.target_id else r
                        for r in comment.replies
                    ]
                }
            )

    async def apply(
        self, location: ReactionLocation, user_id: UserId, direction: Direction
    ) -> bool:
        entity = self._find(location)
        if entity is None:
            return False

        reactions: ReactionSet = getattr(entity, location.set_name)
        if direction == Direction.INCREASE:
            if reactions.contains(user_id):
                return False
            reactions = reactions.with_user(user_id)
        else:
            if not reactions.contains(user_id):
                return False
            reactions = reactions.without_user(user_id)

        self._store_entity(
            location, entity.model_copy(update={location.set_name: reactions})
        )
        return True

    async def exists(self, location: ReactionLocation) -> bool:
        return self._find(location) is not None
