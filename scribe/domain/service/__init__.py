"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .password_service import PasswordService
from .post_service import PostService
from .reaction_service import ReactionLedger
from .user_service import UserService

__all__ = [
    "CommentService",
    "JWTService",
    "PasswordService",
    "PostService",
    "ReactionLedger",
    "Service",
    "UserService",
]
