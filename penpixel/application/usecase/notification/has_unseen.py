"""Unseen notifications use case."""

from pydantic import BaseModel

from penpixel.application.usecase.base import parse_uuid
from penpixel.domain.service import NotificationService
from penpixel.domain.value import UserId


class HasUnseenRequest(BaseModel):
    """Unseen notifications request."""

    user_id: str  # From authenticated user


class HasUnseenResponse(BaseModel):
    """Unseen notifications response."""

    new_notification_available: bool


class HasUnseenUseCase:
    """Use case for the notification badge."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: HasUnseenRequest) -> HasUnseenResponse:
        unseen = await self.notification_service.has_unseen(
            UserId(parse_uuid(request.user_id, "User"))
        )
        return HasUnseenResponse(new_notification_available=unseen)
