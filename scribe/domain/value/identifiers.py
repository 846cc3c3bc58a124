"""Strongly typed identifiers for Scribe domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

from scribe.domain.error import InvalidIdentifierError

UserId = NewType("UserId", UUID)
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)
ReplyId = NewType("ReplyId", UUID)


def parse_identifier(value: str) -> UUID:
    """Parse a textual identifier.

    Raises:
        InvalidIdentifierError: If the value is not a UUID
    """
    try:
        return UUID(value)
    except (ValueError, AttributeError, TypeError):
        raise InvalidIdentifierError(str(value))
