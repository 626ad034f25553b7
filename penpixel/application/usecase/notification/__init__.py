"""Notification use cases."""

from .has_unseen import HasUnseenRequest, HasUnseenResponse, HasUnseenUseCase
from .list_notifications import (
    CountNotificationsRequest,
    CountNotificationsUseCase,
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    NotificationItem,
)

__all__ = [
    "CountNotificationsRequest",
    "CountNotificationsUseCase",
    "HasUnseenRequest",
    "HasUnseenResponse",
    "HasUnseenUseCase",
    "ListNotificationsRequest",
    "ListNotificationsResponse",
    "ListNotificationsUseCase",
    "NotificationItem",
]
