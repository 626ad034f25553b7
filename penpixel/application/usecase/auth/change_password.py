"""Change password use case."""

from pydantic import BaseModel

from penpixel.application.usecase.base import BaseUseCase, parse_uuid
from penpixel.domain.service import UserService
from penpixel.domain.value import UserId


class ChangePasswordRequest(BaseModel):
    """Change password request."""

    user_id: str  # From authenticated user
    current_password: str
    new_password: str


class ChangePasswordResponse(BaseModel):
    """Change password response."""

    status: str


class ChangePasswordUseCase(BaseUseCase):
    """Use case for replacing the signed-in user's password."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize change password use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: ChangePasswordRequest) -> ChangePasswordResponse:
        """Execute change password flow.

        Raises:
            ValidationError: If either password fails the strength rule
            AuthenticationError: If the current password is wrong
            NotFoundError: If the user does not exist
        """
        user_id = UserId(parse_uuid(request.user_id, "User"))
        await self.user_service.change_password(
            user_id, request.current_password, request.new_password
        )
        return ChangePasswordResponse(status="Password changed")
