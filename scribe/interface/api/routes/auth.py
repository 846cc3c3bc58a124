"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel

from scribe.application.usecase.auth import (
    ChangePasswordRequest,
    ChangePasswordResponse,
    ChangePasswordUseCase,
    LoginRequest,
    LoginResponse,
    LoginUseCase,
    RequestRecoveryRequest,
    RequestRecoveryResponse,
    RequestRecoveryUseCase,
    ResetPasswordRequest,
    ResetPasswordResponse,
    ResetPasswordUseCase,
)
from scribe.interface.api.gate import PUBLIC, CurrentIdentity

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


class ChangePasswordAPIRequest(BaseModel):
    """API request for changing the caller's password."""

    current_password: str
    new_password: str


@router.post("/login", response_model=LoginResponse, openapi_extra=PUBLIC)
async def login(
    request: LoginRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> LoginResponse:
    """Exchange email and password for a bearer token.

    Example:
        POST /auth/login
        {"email": "alice@example.com", "password": "secret"}

        Response:
        {
            "token": "eyJhbGciOiJIUzI1NiIs...",
            "token_type": "bearer",
            "expires_at": "2025-01-16T12:34:56Z",
            "user": {"user_id": "...", "username": "alice", ...}
        }
    """
    return await login_use_case.execute(request)


@router.put("/password", response_model=ChangePasswordResponse)
async def change_password(
    request: ChangePasswordAPIRequest,
    identity: CurrentIdentity,
    change_password_use_case: FromDishka[ChangePasswordUseCase],
) -> ChangePasswordResponse:
    """Change the caller's password. The current password must be supplied."""
    return await change_password_use_case.execute(
        ChangePasswordRequest(
            user_id=str(identity.user_id),
            current_password=request.current_password,
            new_password=request.new_password,
        )
    )


@router.post(
    "/recovery",
    response_model=RequestRecoveryResponse,
    status_code=status.HTTP_202_ACCEPTED,
    openapi_extra=PUBLIC,
)
async def request_recovery(
    request: RequestRecoveryRequest,
    request_recovery_use_case: FromDishka[RequestRecoveryUseCase],
) -> RequestRecoveryResponse:
    """Email a recovery code.

    The response is the same whether or not the address has an account.
    """
    return await request_recovery_use_case.execute(request)


@router.post(
    "/recovery/reset", response_model=ResetPasswordResponse, openapi_extra=PUBLIC
)
async def reset_password(
    request: ResetPasswordRequest,
    reset_password_use_case: FromDishka[ResetPasswordUseCase],
) -> ResetPasswordResponse:
    """Set a new password using an emailed recovery code."""
    return await reset_password_use_case.execute(request)
