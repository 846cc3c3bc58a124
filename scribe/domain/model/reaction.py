"""Reaction sets and their addresses.

Every reactable entity carries one ReactionSet per reaction kind: the ids of
the users who reacted plus a counter. The ledger keeps ``count`` equal to
``len(users)``.
"""

from uuid import UUID

from pydantic import Field

from scribe.domain.error import ValidationError
from scribe.domain.value import (
    ReactableType,
    ReactionKind,
    UserId,
    parse_identifier,
)
from scribe.domain.value.common import ValueObject


class ReactionSet(ValueObject):
    """Users who reacted to an entity, and how many they are."""

    users: list[UserId] = Field(default_factory=list)
    count: int = Field(default=0, ge=0)

    def contains(self, user_id: UserId) -> bool:
        return user_id in self.users

    def with_user(self, user_id: UserId) -> "ReactionSet":
        """Return a copy with the user added."""
        return ReactionSet(users=[*self.users, user_id], count=self.count + 1)

    def without_user(self, user_id: UserId) -> "ReactionSet":
        """Return a copy with the user removed."""
        return ReactionSet(
            users=[u for u in self.users if u != user_id], count=self.count - 1
        )


# Which reaction kinds each entity supports, and how many ids address it
_ALLOWED_KINDS: dict[ReactableType, frozenset[ReactionKind]] = {
    ReactableType.POST: frozenset({ReactionKind.UPVOTE, ReactionKind.DOWNVOTE}),
    ReactableType.COMMENT: frozenset({ReactionKind.LIKE, ReactionKind.DISLIKE}),
    ReactableType.REPLY: frozenset({ReactionKind.LIKE, ReactionKind.DISLIKE}),
}
_ARITY: dict[ReactableType, int] = {
    ReactableType.POST: 1,
    ReactableType.COMMENT: 1,
    ReactableType.REPLY: 2,
}


class ReactionLocation(ValueObject):
    """Address of one ReactionSet in the store.

    For posts and comments ``target_id`` is the entity id. For replies
    ``parent_id`` is the owning comment and ``target_id`` the reply.
    """

    entity: ReactableType
    kind: ReactionKind
    target_id: UUID
    parent_id: UUID | None = None

    @property
    def set_name(self) -> str:
        """Attribute holding the ReactionSet on the entity (e.g. ``upvotes``)."""
        return f"{self.kind.value}s"

    @property
    def identifier(self) -> str:
        if self.parent_id is not None:
            return f"{self.parent_id}/{self.target_id}"
        return str(self.target_id)

    def describe(self) -> str:
        return f"{self.entity.value} {self.identifier}"


def resolve_location(
    entity: ReactableType | str, kind: ReactionKind | str, *ids: UUID | str
) -> ReactionLocation:
    """Build the address of a ReactionSet.

    Accepted combinations:
        post    + upvote/downvote + (post_id,)
        comment + like/dislike    + (comment_id,)
        reply   + like/dislike    + (comment_id, reply_id)

    Textual ids are parsed here, so a malformed id never reaches the store.

    Raises:
        ValidationError: If the combination or the number of ids is unsupported
        InvalidIdentifierError: If an id is not a UUID
    """
    try:
        entity = ReactableType(entity)
        kind = ReactionKind(kind)
    except ValueError as e:
        raise ValidationError(str(e))

    if kind not in _ALLOWED_KINDS[entity]:
        raise ValidationError(f"A {entity.value} cannot receive a {kind.value}")
    if len(ids) != _ARITY[entity]:
        raise ValidationError(
            f"A {entity.value} is addressed by {_ARITY[entity]} id(s), got {len(ids)}"
        )

    parsed = [i if isinstance(i, UUID) else parse_identifier(i) for i in ids]

    if entity == ReactableType.REPLY:
        return ReactionLocation(
            entity=entity, kind=kind, parent_id=parsed[0], target_id=parsed[1]
        )
    return ReactionLocation(entity=entity, kind=kind, target_id=parsed[0])
