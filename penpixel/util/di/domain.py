"""Domain layer DI providers."""

from dishka import Scope, provide

from penpixel.config import AuthSettings
from penpixel.domain.repository import (
    BlogRepository,
    CommentRepository,
    NotificationRepository,
    UserRepository,
)
from penpixel.domain.service import (
    BlogService,
    CommentService,
    CounterService,
    JWTService,
    NotificationService,
    UserService,
)
from penpixel.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository, bcrypt_rounds=auth_settings.bcrypt_rounds
        )

    @provide
    def get_counter_service(
        self, blog_repository: BlogRepository, user_repository: UserRepository
    ) -> CounterService:
        """Provide counter domain service."""
        return CounterService(
            blog_repository=blog_repository, user_repository=user_repository
        )

    @provide
    def get_notification_service(
        self,
        notification_repository: NotificationRepository,
        comment_repository: CommentRepository,
        counter_service: CounterService,
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(
            notification_repository=notification_repository,
            comment_repository=comment_repository,
            counter_service=counter_service,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        notification_service: NotificationService,
        counter_service: CounterService,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            notification_service=notification_service,
            counter_service=counter_service,
        )

    @provide
    def get_blog_service(
        self,
        blog_repository: BlogRepository,
        counter_service: CounterService,
        notification_service: NotificationService,
        comment_service: CommentService,
    ) -> BlogService:
        """Provide blog domain service."""
        return BlogService(
            blog_repository=blog_repository,
            counter_service=counter_service,
            notification_service=notification_service,
            comment_service=comment_service,
        )
