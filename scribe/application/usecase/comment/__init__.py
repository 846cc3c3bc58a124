"""Comment and reply use cases."""

from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .create_reply import CreateReplyRequest, CreateReplyUseCase
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .delete_reply import DeleteReplyRequest, DeleteReplyResponse, DeleteReplyUseCase
from .get_comments import GetCommentsRequest, GetCommentsResponse, GetCommentsUseCase
from .update_comment import UpdateCommentRequest, UpdateCommentUseCase
from .update_reply import UpdateReplyRequest, UpdateReplyUseCase

__all__ = [
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "CreateReplyRequest",
    "CreateReplyUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "DeleteReplyRequest",
    "DeleteReplyResponse",
    "DeleteReplyUseCase",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
    "UpdateCommentRequest",
    "UpdateCommentUseCase",
    "UpdateReplyRequest",
    "UpdateReplyUseCase",
]
