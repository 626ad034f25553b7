"""Mock persistence providers for testing."""

from dishka import Scope, provide

from penpixel.domain.repository import (
    BlogRepository,
    CommentRepository,
    NotificationRepository,
    UserRepository,
)
from penpixel.persistence.repository.inmemory import (
    InMemoryBlogRepository,
    InMemoryCommentRepository,
    InMemoryNotificationRepository,
    InMemoryUserRepository,
)
from penpixel.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so that state survives across requests of
    one container, like a database would. Each test builds its own
    container, so tests stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_blog_repository(self) -> BlogRepository:
        """Provide in-memory blog repository."""
        return InMemoryBlogRepository()

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()

    @provide(scope=Scope.APP)
    def get_notification_repository(self) -> NotificationRepository:
        """Provide in-memory notification repository."""
        return InMemoryNotificationRepository()
