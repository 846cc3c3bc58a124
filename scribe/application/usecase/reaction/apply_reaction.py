"""Apply reaction use case."""

from pydantic import BaseModel

from scribe.application.usecase.base import BaseUseCase
from scribe.domain.model import resolve_location
from scribe.domain.service import ReactionLedger
from scribe.domain.value import (
    Direction,
    ReactableType,
    ReactionKind,
    UserId,
    parse_identifier,
)


class ApplyReactionRequest(BaseModel):
    """Apply reaction request.

    ``ids`` address the target: ``[post_id]``, ``[comment_id]`` or
    ``[comment_id, reply_id]``.
    """

    entity: ReactableType
    kind: ReactionKind
    ids: list[str]
    direction: Direction
    user_id: str  # User ID from authenticated user


class ApplyReactionResponse(BaseModel):
    """Apply reaction response.

    ``applied`` is False when the call changed nothing (repeated reaction,
    or withdrawing one that was never given).
    """

    status: str = "ok"
    applied: bool


class ApplyReactionUseCase(BaseUseCase):
    """Use case for liking, disliking and voting."""

    def __init__(self, reaction_ledger: ReactionLedger) -> None:
        """Initialize apply reaction use case.

        Args:
            reaction_ledger: Reaction ledger domain service
        """
        self.reaction_ledger = reaction_ledger

    async def execute(self, request: ApplyReactionRequest) -> ApplyReactionResponse:
        """Resolve the target and apply the reaction.

        Raises:
            ValidationError: If the entity and reaction kind do not go together
            InvalidIdentifierError: If an id is not a UUID
            NotFoundError: If the target does not exist
        """
        user_id = UserId(parse_identifier(request.user_id))
        location = resolve_location(request.entity, request.kind, *request.ids)
        applied = await self.reaction_ledger.apply_reaction(
            location, user_id, request.direction
        )
        return ApplyReactionResponse(applied=applied)
