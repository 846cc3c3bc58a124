"""List users use case."""

from pydantic import BaseModel, Field

from scribe.application.usecase.base import BaseUseCase
from scribe.application.usecase.views import UserView
from scribe.domain.service import UserService


class ListUsersRequest(BaseModel):
    """List users request."""

    limit: int = Field(default=50, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListUsersResponse(BaseModel):
    """List users response."""

    users: list[UserView]


class ListUsersUseCase(BaseUseCase):
    """Use case for listing public profiles."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: ListUsersRequest) -> ListUsersResponse:
        users = await self.user_service.list_users(
            limit=request.limit, offset=request.offset
        )
        return ListUsersResponse(users=[UserView.from_domain(u) for u in users])
