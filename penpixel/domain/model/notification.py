"""Notification entity.

Notifications record likes, comments and replies for the user they concern.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from penpixel.domain.model.common import DomainModel
from penpixel.domain.value import (
    BlogId,
    CommentId,
    NotificationId,
    NotificationType,
    UserId,
)


class Notification(DomainModel):
    """Notification entity.

    Business rules:
    - At most one like notification per (user, blog)
    - comment_id is the comment the notification is about
    - replied_on_comment_id is set for replies (the comment answered)
    - reply_id links a comment notification to the reply its recipient wrote
    """

    id: NotificationId
    type: NotificationType
    notification_for: UserId  # Recipient
    user_id: UserId  # Actor
    blog_id: Optional[BlogId] = None
    comment_id: Optional[CommentId] = None
    replied_on_comment_id: Optional[CommentId] = None
    reply_id: Optional[CommentId] = None
    seen: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
