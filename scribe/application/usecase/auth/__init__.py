"""Authentication use cases."""

from .change_password import (
    ChangePasswordRequest,
    ChangePasswordResponse,
    ChangePasswordUseCase,
)
from .login import LoginRequest, LoginResponse, LoginUseCase
from .request_recovery import (
    RequestRecoveryRequest,
    RequestRecoveryResponse,
    RequestRecoveryUseCase,
)
from .reset_password import (
    ResetPasswordRequest,
    ResetPasswordResponse,
    ResetPasswordUseCase,
)

__all__ = [
    "ChangePasswordRequest",
    "ChangePasswordResponse",
    "ChangePasswordUseCase",
    "LoginRequest",
    "LoginResponse",
    "LoginUseCase",
    "RequestRecoveryRequest",
    "RequestRecoveryResponse",
    "RequestRecoveryUseCase",
    "ResetPasswordRequest",
    "ResetPasswordResponse",
    "ResetPasswordUseCase",
]
