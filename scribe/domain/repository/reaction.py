"""Reaction repository interface."""

from abc import ABC, abstractmethod

from scribe.domain.model.reaction import ReactionLocation
from scribe.domain.value import Direction, UserId


class ReactionRepository(ABC):
    """Store-side half of the reaction ledger.

    ``apply`` must be a single conditional update: the membership guard,
    the set change and the counter change happen together or not at all.
    """

    @abstractmethod
    async def apply(
        self, location: ReactionLocation, user_id: UserId, direction: Direction
    ) -> bool:
        """Add or withdraw a user's reaction.

        INCREASE only matches when the user is not yet in the set; DECREASE
        only matches when the user is in it.

        Args:
            location: Which ReactionSet to change
            user_id: The reacting user
            direction: INCREASE or DECREASE

        Returns:
            True if a row was changed, False if the guard or the filter
            matched nothing
        """
        pass

    @abstractmethod
    async def exists(self, location: ReactionLocation) -> bool:
        """Whether the entity the location points at exists."""
        pass
