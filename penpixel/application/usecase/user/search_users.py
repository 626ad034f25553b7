"""Search users use case."""

from pydantic import BaseModel

from penpixel.application.usecase.common import AuthorSummary
from penpixel.config import PaginationSettings
from penpixel.domain.service import UserService


class SearchUsersRequest(BaseModel):
    """Search users request."""

    query: str


class SearchUsersResponse(BaseModel):
    """Search users response."""

    users: list[AuthorSummary]


class SearchUsersUseCase:
    """Use case for finding users by username."""

    def __init__(
        self, user_service: UserService, pagination: PaginationSettings
    ) -> None:
        """Initialize search users use case.

        Args:
            user_service: User domain service
            pagination: Page size settings
        """
        self.user_service = user_service
        self.pagination = pagination

    async def execute(self, request: SearchUsersRequest) -> SearchUsersResponse:
        """Case-insensitive username substring search."""
        users = await self.user_service.search(
            request.query, limit=self.pagination.user_search_limit
        )
        return SearchUsersResponse(users=[AuthorSummary.from_user(u) for u in users])
