"""Post routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, status
from pydantic import BaseModel

from scribe.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from scribe.application.usecase.views import PostView
from scribe.interface.api.gate import PUBLIC, CurrentIdentity

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    title: str
    content: str


class UpdatePostAPIRequest(BaseModel):
    """API request for editing a post. Omitted fields are left unchanged."""

    title: str | None = None
    content: str | None = None


@router.post("", response_model=PostView, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    identity: CurrentIdentity,
    create_post_use_case: FromDishka[CreatePostUseCase],
) -> PostView:
    """Create a post authored by the caller."""
    return await create_post_use_case.execute(
        CreatePostRequest(
            author_id=str(identity.user_id),
            title=request.title,
            content=request.content,
        )
    )


@router.get("", response_model=ListPostsResponse, openapi_extra=PUBLIC)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    limit: int = Query(30, ge=1, le=100),
    offset: int = Query(0, ge=0),
) -> ListPostsResponse:
    """List posts, newest first."""
    return await list_posts_use_case.execute(
        ListPostsRequest(limit=limit, offset=offset)
    )


@router.get("/{post_id}", response_model=PostView, openapi_extra=PUBLIC)
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> PostView:
    """Get a single post with its vote sets."""
    return await get_post_use_case.execute(GetPostRequest(post_id=post_id))


@router.patch("/{post_id}", response_model=PostView)
async def update_post(
    post_id: str,
    request: UpdatePostAPIRequest,
    identity: CurrentIdentity,
    update_post_use_case: FromDishka[UpdatePostUseCase],
) -> PostView:
    """Edit a post. Only its author may do this."""
    return await update_post_use_case.execute(
        UpdatePostRequest(
            post_id=post_id,
            user_id=str(identity.user_id),
            title=request.title,
            content=request.content,
        )
    )


@router.delete("/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: str,
    identity: CurrentIdentity,
    delete_post_use_case: FromDishka[DeletePostUseCase],
) -> DeletePostResponse:
    """Delete a post. Its comments are kept."""
    return await delete_post_use_case.execute(
        DeletePostRequest(post_id=post_id, user_id=str(identity.user_id))
    )
