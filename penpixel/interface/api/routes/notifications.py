"""Notification routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query

from penpixel.application.usecase.common import CountResponse
from penpixel.application.usecase.notification import (
    CountNotificationsRequest,
    CountNotificationsUseCase,
    HasUnseenRequest,
    HasUnseenResponse,
    HasUnseenUseCase,
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
)
from penpixel.domain.service import JWTService
from penpixel.domain.value import NotificationFilter
from penpixel.interface.api.security import require_user_id

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


@router.get("/new", response_model=HasUnseenResponse)
async def has_unseen(
    has_unseen_use_case: FromDishka[HasUnseenUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> HasUnseenResponse:
    """Whether the user has notifications they have not seen."""
    user_id = require_user_id(jwt_service, authorization, "read notifications")
    return await has_unseen_use_case.execute(HasUnseenRequest(user_id=user_id))


@router.get("", response_model=ListNotificationsResponse)
async def list_notifications(
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    notification_filter: NotificationFilter = Query(
        default=NotificationFilter.ALL, alias="filter"
    ),
    page: int = Query(default=1, ge=1),
    deleted_count: int = Query(default=0, ge=0),
    authorization: str | None = Header(default=None),
) -> ListNotificationsResponse:
    """Get a page of the notification feed and mark it seen."""
    user_id = require_user_id(jwt_service, authorization, "read notifications")
    return await list_notifications_use_case.execute(
        ListNotificationsRequest(
            user_id=user_id,
            filter=notification_filter,
            page=page,
            deleted_count=deleted_count,
        )
    )


@router.get("/count", response_model=CountResponse)
async def count_notifications(
    count_notifications_use_case: FromDishka[CountNotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    notification_filter: NotificationFilter = Query(
        default=NotificationFilter.ALL, alias="filter"
    ),
    authorization: str | None = Header(default=None),
) -> CountResponse:
    """Count the notification feed for a filter."""
    user_id = require_user_id(jwt_service, authorization, "read notifications")
    return await count_notifications_use_case.execute(
        CountNotificationsRequest(user_id=user_id, filter=notification_filter)
    )
