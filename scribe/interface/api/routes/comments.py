"""Comment and reply routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel

from scribe.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    CreateReplyRequest,
    CreateReplyUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    DeleteReplyRequest,
    DeleteReplyResponse,
    DeleteReplyUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
    UpdateReplyRequest,
    UpdateReplyUseCase,
)
from scribe.application.usecase.views import CommentView, ReplyView
from scribe.interface.api.gate import PUBLIC, CurrentIdentity

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class ContentAPIRequest(BaseModel):
    """API request body carrying comment or reply text."""

    content: str


@router.post(
    "/posts/{post_id}/comments",
    response_model=CommentView,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: str,
    request: ContentAPIRequest,
    identity: CurrentIdentity,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CommentView:
    """Comment on a post."""
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            post_id=post_id,
            author_id=str(identity.user_id),
            content=request.content,
        )
    )


@router.get(
    "/posts/{post_id}/comments",
    response_model=GetCommentsResponse,
    openapi_extra=PUBLIC,
)
async def get_comments(
    post_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """All comments on a post, oldest first, each with its replies."""
    return await get_comments_use_case.execute(GetCommentsRequest(post_id=post_id))


@router.patch("/comments/{comment_id}", response_model=CommentView)
async def update_comment(
    comment_id: str,
    request: ContentAPIRequest,
    identity: CurrentIdentity,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
) -> CommentView:
    """Edit a comment. Only its author may do this."""
    return await update_comment_use_case.execute(
        UpdateCommentRequest(
            comment_id=comment_id,
            user_id=str(identity.user_id),
            content=request.content,
        )
    )


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    identity: CurrentIdentity,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
) -> DeleteCommentResponse:
    """Delete a comment and its replies. The post is untouched."""
    return await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=comment_id, user_id=str(identity.user_id))
    )


@router.post(
    "/comments/{comment_id}/replies",
    response_model=ReplyView,
    status_code=status.HTTP_201_CREATED,
)
async def create_reply(
    comment_id: str,
    request: ContentAPIRequest,
    identity: CurrentIdentity,
    create_reply_use_case: FromDishka[CreateReplyUseCase],
) -> ReplyView:
    """Reply to a comment."""
    return await create_reply_use_case.execute(
        CreateReplyRequest(
            comment_id=comment_id,
            author_id=str(identity.user_id),
            content=request.content,
        )
    )


@router.patch("/comments/{comment_id}/replies/{reply_id}", response_model=ReplyView)
async def update_reply(
    comment_id: str,
    reply_id: str,
    request: ContentAPIRequest,
    identity: CurrentIdentity,
    update_reply_use_case: FromDishka[UpdateReplyUseCase],
) -> ReplyView:
    """Edit a reply. Only its author may do this."""
    return await update_reply_use_case.execute(
        UpdateReplyRequest(
            comment_id=comment_id,
            reply_id=reply_id,
            user_id=str(identity.user_id),
            content=request.content,
        )
    )


@router.delete(
    "/comments/{comment_id}/replies/{reply_id}", response_model=DeleteReplyResponse
)
async def delete_reply(
    comment_id: str,
    reply_id: str,
    identity: CurrentIdentity,
    delete_reply_use_case: FromDishka[DeleteReplyUseCase],
) -> DeleteReplyResponse:
    """Delete a reply."""
    return await delete_reply_use_case.execute(
        DeleteReplyRequest(
            comment_id=comment_id,
            reply_id=reply_id,
            user_id=str(identity.user_id),
        )
    )
