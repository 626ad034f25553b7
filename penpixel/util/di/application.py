"""Application layer DI providers."""

from dishka import Scope, provide

from penpixel.application.usecase.auth import (
    ChangePasswordUseCase,
    SigninUseCase,
    SignupUseCase,
)
from penpixel.application.usecase.blog import (
    CountBlogsUseCase,
    CreateBlogUseCase,
    DeleteBlogUseCase,
    GetBlogUseCase,
    ListBlogsUseCase,
    UpdateBlogUseCase,
    UserBlogsUseCase,
)
from penpixel.application.usecase.comment import (
    AddCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
)
from penpixel.application.usecase.like import LikeStatusUseCase, ToggleLikeUseCase
from penpixel.application.usecase.notification import (
    CountNotificationsUseCase,
    HasUnseenUseCase,
    ListNotificationsUseCase,
)
from penpixel.application.usecase.user import (
    GetProfileUseCase,
    SearchUsersUseCase,
    UpdateProfileImgUseCase,
    UpdateProfileUseCase,
)
from penpixel.config import PaginationSettings
from penpixel.domain.service import (
    BlogService,
    CommentService,
    JWTService,
    NotificationService,
    UserService,
)
from penpixel.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_signup_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> SignupUseCase:
        """Provide signup use case."""
        return SignupUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_signin_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> SigninUseCase:
        """Provide signin use case."""
        return SigninUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_change_password_use_case(
        self, user_service: UserService
    ) -> ChangePasswordUseCase:
        """Provide change password use case."""
        return ChangePasswordUseCase(user_service=user_service)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_get_profile_use_case(self, user_service: UserService) -> GetProfileUseCase:
        """Provide get profile use case."""
        return GetProfileUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_update_profile_use_case(
        self, user_service: UserService
    ) -> UpdateProfileUseCase:
        """Provide update profile use case."""
        return UpdateProfileUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_update_profile_img_use_case(
        self, user_service: UserService
    ) -> UpdateProfileImgUseCase:
        """Provide update profile image use case."""
        return UpdateProfileImgUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_search_users_use_case(
        self, user_service: UserService, pagination: PaginationSettings
    ) -> SearchUsersUseCase:
        """Provide search users use case."""
        return SearchUsersUseCase(user_service=user_service, pagination=pagination)

    # Blog use cases
    @provide(scope=Scope.REQUEST)
    def get_create_blog_use_case(self, blog_service: BlogService) -> CreateBlogUseCase:
        """Provide create blog use case."""
        return CreateBlogUseCase(blog_service=blog_service)

    @provide(scope=Scope.REQUEST)
    def get_update_blog_use_case(self, blog_service: BlogService) -> UpdateBlogUseCase:
        """Provide update blog use case."""
        return UpdateBlogUseCase(blog_service=blog_service)

    @provide(scope=Scope.REQUEST)
    def get_get_blog_use_case(
        self, blog_service: BlogService, user_service: UserService
    ) -> GetBlogUseCase:
        """Provide get blog use case."""
        return GetBlogUseCase(blog_service=blog_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_blog_use_case(self, blog_service: BlogService) -> DeleteBlogUseCase:
        """Provide delete blog use case."""
        return DeleteBlogUseCase(blog_service=blog_service)

    @provide(scope=Scope.REQUEST)
    def get_list_blogs_use_case(
        self,
        blog_service: BlogService,
        user_service: UserService,
        pagination: PaginationSettings,
    ) -> ListBlogsUseCase:
        """Provide list blogs use case."""
        return ListBlogsUseCase(
            blog_service=blog_service, user_service=user_service, pagination=pagination
        )

    @provide(scope=Scope.REQUEST)
    def get_count_blogs_use_case(self, blog_service: BlogService) -> CountBlogsUseCase:
        """Provide count blogs use case."""
        return CountBlogsUseCase(blog_service=blog_service)

    @provide(scope=Scope.REQUEST)
    def get_user_blogs_use_case(
        self,
        blog_service: BlogService,
        user_service: UserService,
        pagination: PaginationSettings,
    ) -> UserBlogsUseCase:
        """Provide author dashboard use case."""
        return UserBlogsUseCase(
            blog_service=blog_service, user_service=user_service, pagination=pagination
        )

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_add_comment_use_case(
        self,
        comment_service: CommentService,
        blog_service: BlogService,
        user_service: UserService,
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(
            comment_service=comment_service,
            blog_service=blog_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self,
        comment_service: CommentService,
        blog_service: BlogService,
        user_service: UserService,
        pagination: PaginationSettings,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service,
            blog_service=blog_service,
            user_service=user_service,
            pagination=pagination,
        )

    # Like use cases
    @provide(scope=Scope.REQUEST)
    def get_toggle_like_use_case(
        self, blog_service: BlogService, notification_service: NotificationService
    ) -> ToggleLikeUseCase:
        """Provide toggle like use case."""
        return ToggleLikeUseCase(
            blog_service=blog_service, notification_service=notification_service
        )

    @provide(scope=Scope.REQUEST)
    def get_like_status_use_case(
        self, blog_service: BlogService, notification_service: NotificationService
    ) -> LikeStatusUseCase:
        """Provide like status use case."""
        return LikeStatusUseCase(
            blog_service=blog_service, notification_service=notification_service
        )

    # Notification use cases
    @provide(scope=Scope.REQUEST)
    def get_has_unseen_use_case(
        self, notification_service: NotificationService
    ) -> HasUnseenUseCase:
        """Provide unseen notifications use case."""
        return HasUnseenUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_list_notifications_use_case(
        self,
        notification_service: NotificationService,
        user_service: UserService,
        blog_service: BlogService,
        comment_service: CommentService,
        pagination: PaginationSettings,
    ) -> ListNotificationsUseCase:
        """Provide list notifications use case."""
        return ListNotificationsUseCase(
            notification_service=notification_service,
            user_service=user_service,
            blog_service=blog_service,
            comment_service=comment_service,
            pagination=pagination,
        )

    @provide(scope=Scope.REQUEST)
    def get_count_notifications_use_case(
        self, notification_service: NotificationService
    ) -> CountNotificationsUseCase:
        """Provide count notifications use case."""
        return CountNotificationsUseCase(notification_service=notification_service)
