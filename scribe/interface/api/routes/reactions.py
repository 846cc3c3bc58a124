"""Reaction routes.

Every endpoint answers ``{"status": "ok", "applied": bool}``; ``applied`` is
False when the call changed nothing.
"""

from enum import Enum

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from scribe.application.usecase.reaction import (
    ApplyReactionRequest,
    ApplyReactionResponse,
    ApplyReactionUseCase,
)
from scribe.domain.value import Direction, ReactableType
from scribe.interface.api.gate import CurrentIdentity

router = APIRouter(tags=["reactions"], route_class=DishkaRoute)


class Vote(str, Enum):
    """Reactions a post accepts."""

    UPVOTE = "upvote"
    DOWNVOTE = "downvote"


class Like(str, Enum):
    """Reactions a comment or reply accepts."""

    LIKE = "like"
    DISLIKE = "dislike"


@router.patch(
    "/posts/{post_id}/{kind}/{direction}", response_model=ApplyReactionResponse
)
async def react_to_post(
    post_id: str,
    kind: Vote,
    direction: Direction,
    identity: CurrentIdentity,
    apply_reaction_use_case: FromDishka[ApplyReactionUseCase],
) -> ApplyReactionResponse:
    """Upvote or downvote a post, or withdraw the vote.

    Example:
        PATCH /posts/3f2a.../upvote/inc

        Response:
        {"status": "ok", "applied": true}
    """
    return await apply_reaction_use_case.execute(
        ApplyReactionRequest(
            entity=ReactableType.POST,
            kind=kind.value,
            ids=[post_id],
            direction=direction,
            user_id=str(identity.user_id),
        )
    )


@router.patch(
    "/comments/{comment_id}/{kind}/{direction}", response_model=ApplyReactionResponse
)
async def react_to_comment(
    comment_id: str,
    kind: Like,
    direction: Direction,
    identity: CurrentIdentity,
    apply_reaction_use_case: FromDishka[ApplyReactionUseCase],
) -> ApplyReactionResponse:
    """Like or dislike a comment, or withdraw the reaction."""
    return await apply_reaction_use_case.execute(
        ApplyReactionRequest(
            entity=ReactableType.COMMENT,
            kind=kind.value,
            ids=[comment_id],
            direction=direction,
            user_id=str(identity.user_id),
        )
    )


@router.patch(
    "/comments/{comment_id}/replies/{reply_id}/{kind}/{direction}",
    response_model=ApplyReactionResponse,
)
async def react_to_reply(
    comment_id: str,
    reply_id: str,
    kind: Like,
    direction: Direction,
    identity: CurrentIdentity,
    apply_reaction_use_case: FromDishka[ApplyReactionUseCase],
) -> ApplyReactionResponse:
    """Like or dislike a reply. Only the addressed reply is changed."""
    return await apply_reaction_use_case.execute(
        ApplyReactionRequest(
            entity=ReactableType.REPLY,
            kind=kind.value,
            ids=[comment_id, reply_id],
            direction=direction,
            user_id=str(identity.user_id),
        )
    )
