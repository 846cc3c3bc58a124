"""Domain layer DI providers."""

from dishka import Scope, provide

from scribe.config import AuthSettings
from scribe.domain.repository import (
    CommentRepository,
    PostRepository,
    ReactionRepository,
    UserRepository,
)
from scribe.domain.service import (
    CommentService,
    JWTService,
    PasswordService,
    PostService,
    ReactionLedger,
    UserService,
)
from scribe.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service.

        APP-scoped: it holds no per-request state.
        """
        return JWTService(auth_settings=auth_settings)

    @provide(scope=Scope.APP)
    def get_password_service(self, auth_settings: AuthSettings) -> PasswordService:
        """Provide password hashing service."""
        return PasswordService(auth_settings=auth_settings)

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        password_service: PasswordService,
        auth_settings: AuthSettings,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            password_service=password_service,
            auth_settings=auth_settings,
        )

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_reaction_ledger(
        self, reaction_repository: ReactionRepository
    ) -> ReactionLedger:
        """Provide the reaction ledger."""
        return ReactionLedger(reaction_repository=reaction_repository)
