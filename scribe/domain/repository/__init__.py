"""Repository interfaces for the Scribe domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from scribe.domain.repository.comment import CommentRepository
from scribe.domain.repository.post import PostRepository
from scribe.domain.repository.reaction import ReactionRepository
from scribe.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "PostRepository",
    "CommentRepository",
    "ReactionRepository",
]
