"""Domain value objects for Scribe.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from datetime import datetime
from enum import Enum

from pydantic import field_validator

from scribe.domain.value.common import RootValueObject, ValueObject
from scribe.domain.value.identifiers import UserId


class ReactableType(str, Enum):
    """Type of entity that carries reactions."""

    POST = "post"
    COMMENT = "comment"
    REPLY = "reply"


class ReactionKind(str, Enum):
    """Kind of reaction.

    Posts are voted on; comments and replies are liked.
    """

    UPVOTE = "upvote"
    DOWNVOTE = "downvote"
    LIKE = "like"
    DISLIKE = "dislike"


class Direction(str, Enum):
    """Whether a reaction is being added or withdrawn."""

    INCREASE = "inc"
    DECREASE = "dec"


class Username(RootValueObject[str]):
    """Public account name.

    3-32 characters: letters, digits, underscores, dots and hyphens.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not re.match(r"^[A-Za-z0-9_.-]{3,32}$", v):
            raise ValueError(
                "Username must be 3-32 characters of letters, digits, '_', '.' or '-'"
            )
        return v


class Email(RootValueObject[str]):
    """Email address, normalized to lowercase."""

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate and normalize the address."""
        v = v.strip().lower()
        if len(v) > 254 or not re.match(r"^[^@\s]+@[^@\s]+\.[^@\s]+$", v):
            raise ValueError("Invalid email address")
        return v


class Identity(ValueObject):
    """Authenticated caller of one request.

    Built from a validated bearer token and never modified afterwards.
    """

    user_id: UserId
    expires_at: datetime
