"""Domain model entities for Scribe."""

from scribe.domain.model.comment import Comment, Reply
from scribe.domain.model.post import Post
from scribe.domain.model.reaction import (
    ReactionLocation,
    ReactionSet,
    resolve_location,
)
from scribe.domain.model.user import User

__all__ = [
    "User",
    "Post",
    "Comment",
    "Reply",
    "ReactionSet",
    "ReactionLocation",
    "resolve_location",
]
