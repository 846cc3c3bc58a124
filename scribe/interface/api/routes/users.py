"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, UploadFile, status
from pydantic import BaseModel

from scribe.application.usecase.post import (
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
)
from scribe.application.usecase.user import (
    CreateUserRequest,
    CreateUserUseCase,
    GetCurrentUserUseCase,
    GetUserRequest,
    GetUserUseCase,
    ListUsersRequest,
    ListUsersResponse,
    ListUsersUseCase,
    UploadAvatarRequest,
    UploadAvatarUseCase,
)
from scribe.application.usecase.views import ProfileView, UserView
from scribe.interface.api.gate import PUBLIC, CurrentIdentity

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class CreateUserAPIRequest(BaseModel):
    """API request for creating an account."""

    username: str
    email: str
    password: str


@router.post(
    "",
    response_model=ProfileView,
    status_code=status.HTTP_201_CREATED,
    openapi_extra=PUBLIC,
)
async def create_user(
    request: CreateUserAPIRequest,
    create_user_use_case: FromDishka[CreateUserUseCase],
) -> ProfileView:
    """Create an account.

    Raises 409 if the username or email is already taken.
    """
    return await create_user_use_case.execute(
        CreateUserRequest(
            username=request.username,
            email=request.email,
            password=request.password,
        )
    )


@router.get("", response_model=ListUsersResponse, openapi_extra=PUBLIC)
async def list_users(
    list_users_use_case: FromDishka[ListUsersUseCase],
    limit: int = Query(50, ge=1, le=100),
    offset: int = Query(0, ge=0),
) -> ListUsersResponse:
    """List accounts, oldest first."""
    return await list_users_use_case.execute(
        ListUsersRequest(limit=limit, offset=offset)
    )


# /me routes are registered before /{user_id} so "me" is never parsed as an id


@router.get("/me", response_model=ProfileView)
async def get_me(
    identity: CurrentIdentity,
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
) -> ProfileView:
    """The caller's own account, including the email address."""
    return await get_current_user_use_case.execute(
        GetUserRequest(user_id=str(identity.user_id))
    )


@router.get("/me/posts", response_model=ListPostsResponse)
async def get_my_posts(
    identity: CurrentIdentity,
    list_posts_use_case: FromDishka[ListPostsUseCase],
    limit: int = Query(30, ge=1, le=100),
    offset: int = Query(0, ge=0),
) -> ListPostsResponse:
    """Posts written by the caller, newest first."""
    return await list_posts_use_case.execute(
        ListPostsRequest(author_id=str(identity.user_id), limit=limit, offset=offset)
    )


@router.put("/me/avatar", response_model=ProfileView)
async def upload_avatar(
    file: UploadFile,
    identity: CurrentIdentity,
    upload_avatar_use_case: FromDishka[UploadAvatarUseCase],
) -> ProfileView:
    """Replace the caller's avatar (multipart field ``file``).

    Accepts JPEG, PNG, GIF and WebP images up to 5 MB.
    """
    data = await file.read()
    return await upload_avatar_use_case.execute(
        UploadAvatarRequest(
            user_id=str(identity.user_id),
            content_type=file.content_type or "",
            data=data,
        )
    )


@router.get("/{user_id}", response_model=UserView, openapi_extra=PUBLIC)
async def get_user(
    user_id: str,
    get_user_use_case: FromDishka[GetUserUseCase],
) -> UserView:
    """Public view of one account."""
    return await get_user_use_case.execute(GetUserRequest(user_id=user_id))


@router.get("/{user_id}/posts", response_model=ListPostsResponse, openapi_extra=PUBLIC)
async def get_user_posts(
    user_id: str,
    list_posts_use_case: FromDishka[ListPostsUseCase],
    limit: int = Query(30, ge=1, le=100),
    offset: int = Query(0, ge=0),
) -> ListPostsResponse:
    """Posts written by one user, newest first."""
    return await list_posts_use_case.execute(
        ListPostsRequest(author_id=user_id, limit=limit, offset=offset)
    )
