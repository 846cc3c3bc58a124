"""Domain value objects for Scribe."""

from scribe.domain.value.identifiers import (
    CommentId,
    PostId,
    ReplyId,
    UserId,
    parse_identifier,
)
from scribe.domain.value.types import (
    Direction,
    Email,
    Identity,
    ReactableType,
    ReactionKind,
    Username,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "ReplyId",
    "parse_identifier",
    # Types
    "Username",
    "Email",
    "ReactableType",
    "ReactionKind",
    "Direction",
    "Identity",
]
