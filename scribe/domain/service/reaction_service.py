"""Reaction ledger.

Maintains the per-user membership sets and their counters on posts,
comments and replies. Each call is a single conditional update in the
store, so concurrent reactions on the same entity never lose or duplicate
a change and ``count`` always equals the number of users in the set.
"""

import logfire

from scribe.domain.error import NotFoundError
from scribe.domain.model import ReactionLocation
from scribe.domain.repository import ReactionRepository
from scribe.domain.value import Direction, UserId

from .base import Service


class ReactionLedger(Service):
    """Applies reactions to posts, comments and replies."""

    def __init__(self, reaction_repository: ReactionRepository) -> None:
        """Initialize the ledger.

        Args:
            reaction_repository: Store access for reaction sets
        """
        self.reaction_repository = reaction_repository

    async def apply_reaction(
        self, location: ReactionLocation, user_id: UserId, direction: Direction
    ) -> bool:
        """Add or withdraw one user's reaction.

        A repeated INCREASE, or a DECREASE by a user who never reacted, is a
        no-op.

        Args:
            location: Address from ``resolve_location``
            user_id: The reacting user
            direction: INCREASE or DECREASE

        Returns:
            True if the set and counter changed, False for a no-op

        Raises:
            NotFoundError: If the target entity does not exist
            DatabaseError: If the store fails
        """
        with logfire.span(
            "reaction_ledger.apply_reaction",
            entity=location.entity.value,
            kind=location.kind.value,
            target=location.describe(),
            user_id=str(user_id),
            direction=direction.value,
        ):
            applied = await self.reaction_repository.apply(
                location, user_id, direction
            )
            if applied:
                logfire.info(
                    "Reaction applied",
                    target=location.describe(),
                    kind=location.kind.value,
                    direction=direction.value,
                )
                return True

            if not await self.reaction_repository.exists(location):
                logfire.warn("Reaction target not found", target=location.describe())
                raise NotFoundError(
                    location.entity.value.capitalize(), location.identifier
                )

            logfire.info(
                "Reaction unchanged",
                target=location.describe(),
                kind=location.kind.value,
                direction=direction.value,
            )
            return False

