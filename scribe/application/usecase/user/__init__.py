"""User use cases."""

from .create_user import CreateUserRequest, CreateUserUseCase
from .get_user import GetCurrentUserUseCase, GetUserRequest, GetUserUseCase
from .list_users import ListUsersRequest, ListUsersResponse, ListUsersUseCase
from .upload_avatar import UploadAvatarRequest, UploadAvatarUseCase

__all__ = [
    "CreateUserRequest",
    "CreateUserUseCase",
    "GetCurrentUserUseCase",
    "GetUserRequest",
    "GetUserUseCase",
    "ListUsersRequest",
    "ListUsersResponse",
    "ListUsersUseCase",
    "UploadAvatarRequest",
    "UploadAvatarUseCase",
]
