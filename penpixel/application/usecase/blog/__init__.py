"""Blog use cases."""

from .create_blog import CreateBlogRequest, CreateBlogResponse, CreateBlogUseCase
from .delete_blog import DeleteBlogRequest, DeleteBlogResponse, DeleteBlogUseCase
from .get_blog import (
    BlogDetail,
    GetBlogRequest,
    GetBlogResponse,
    GetBlogUseCase,
    parse_slug,
)
from .list_blogs import (
    CountBlogsUseCase,
    ListBlogsRequest,
    ListBlogsResponse,
    ListBlogsUseCase,
)
from .update_blog import UpdateBlogRequest, UpdateBlogResponse, UpdateBlogUseCase
from .user_blogs import UserBlogsRequest, UserBlogsResponse, UserBlogsUseCase

__all__ = [
    "BlogDetail",
    "CountBlogsUseCase",
    "CreateBlogRequest",
    "CreateBlogResponse",
    "CreateBlogUseCase",
    "DeleteBlogRequest",
    "DeleteBlogResponse",
    "DeleteBlogUseCase",
    "GetBlogRequest",
    "GetBlogResponse",
    "GetBlogUseCase",
    "ListBlogsRequest",
    "ListBlogsResponse",
    "ListBlogsUseCase",
    "UpdateBlogRequest",
    "UpdateBlogResponse",
    "UpdateBlogUseCase",
    "UserBlogsRequest",
    "UserBlogsResponse",
    "UserBlogsUseCase",
    "parse_slug",
]
