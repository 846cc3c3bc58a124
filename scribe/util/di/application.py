"""Application layer DI providers."""

from dishka import Scope, provide

from scribe.application.usecase.auth import (
    ChangePasswordUseCase,
    LoginUseCase,
    RequestRecoveryUseCase,
    ResetPasswordUseCase,
)
from scribe.application.usecase.comment import (
    CreateCommentUseCase,
    CreateReplyUseCase,
    DeleteCommentUseCase,
    DeleteReplyUseCase,
    GetCommentsUseCase,
    UpdateCommentUseCase,
    UpdateReplyUseCase,
)
from scribe.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
)
from scribe.application.usecase.reaction import ApplyReactionUseCase
from scribe.application.usecase.user import (
    CreateUserUseCase,
    GetCurrentUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UploadAvatarUseCase,
)
from scribe.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed.

    Use cases are REQUEST-scoped; their constructor arguments are resolved
    from the domain and infrastructure providers.
    """

    scope = Scope.REQUEST

    # Auth use cases
    login = provide(LoginUseCase)
    change_password = provide(ChangePasswordUseCase)
    request_recovery = provide(RequestRecoveryUseCase)
    reset_password = provide(ResetPasswordUseCase)

    # User use cases
    create_user = provide(CreateUserUseCase)
    get_user = provide(GetUserUseCase)
    get_current_user = provide(GetCurrentUserUseCase)
    list_users = provide(ListUsersUseCase)
    upload_avatar = provide(UploadAvatarUseCase)

    # Post use cases
    create_post = provide(CreatePostUseCase)
    get_post = provide(GetPostUseCase)
    list_posts = provide(ListPostsUseCase)
    update_post = provide(UpdatePostUseCase)
    delete_post = provide(DeletePostUseCase)

    # Comment use cases
    create_comment = provide(CreateCommentUseCase)
    get_comments = provide(GetCommentsUseCase)
    update_comment = provide(UpdateCommentUseCase)
    delete_comment = provide(DeleteCommentUseCase)
    create_reply = provide(CreateReplyUseCase)
    update_reply = provide(UpdateReplyUseCase)
    delete_reply = provide(DeleteReplyUseCase)

    # Reaction use cases
    apply_reaction = provide(ApplyReactionUseCase)
