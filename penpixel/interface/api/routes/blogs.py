"""Blog routes."""

from typing import Any, Literal

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, Query, status
from pydantic import BaseModel, Field

from penpixel.application.usecase.blog import (
    CountBlogsUseCase,
    CreateBlogRequest,
    CreateBlogResponse,
    CreateBlogUseCase,
    DeleteBlogRequest,
    DeleteBlogResponse,
    DeleteBlogUseCase,
    GetBlogRequest,
    GetBlogResponse,
    GetBlogUseCase,
    ListBlogsRequest,
    ListBlogsResponse,
    ListBlogsUseCase,
    UpdateBlogRequest,
    UpdateBlogResponse,
    UpdateBlogUseCase,
    UserBlogsRequest,
    UserBlogsResponse,
    UserBlogsUseCase,
)
from penpixel.application.usecase.common import CountResponse
from penpixel.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from penpixel.domain.service import JWTService
from penpixel.domain.value import BlogSortOrder
from penpixel.interface.api.security import require_user_id

router = APIRouter(prefix="/blogs", tags=["blogs"], route_class=DishkaRoute)


class BlogAPIRequest(BaseModel):
    """API request for creating or editing a blog."""

    title: str
    description: str = ""
    banner: str = ""
    content: dict[str, Any] = Field(default_factory=dict)
    tags: list[str] = Field(default_factory=list)
    draft: bool = False


def _listing_request(
    sort: BlogSortOrder,
    page: int,
    tag: str | None,
    query: str | None,
    author: str | None,
    exclude: str | None,
    limit: int | None,
) -> ListBlogsRequest:
    return ListBlogsRequest(
        sort=sort,
        page=page,
        tag=tag,
        query=query,
        author_id=author,
        exclude_slug=exclude,
        limit=limit,
    )


@router.post(
    "", response_model=CreateBlogResponse, status_code=status.HTTP_201_CREATED
)
async def create_blog(
    request: BlogAPIRequest,
    create_blog_use_case: FromDishka[CreateBlogUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> CreateBlogResponse:
    """Publish a blog or save a draft.

    Raises:
        HTTPException: 401 if not authenticated, 400 if the blog is incomplete
    """
    user_id = require_user_id(jwt_service, authorization, "create blogs")

    try:
        return await create_blog_use_case.execute(
            CreateBlogRequest(author_id=user_id, **request.model_dump())
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("", response_model=ListBlogsResponse)
async def list_blogs(
    list_blogs_use_case: FromDishka[ListBlogsUseCase],
    sort: BlogSortOrder = BlogSortOrder.LATEST,
    page: int = Query(default=1, ge=1),
    tag: str | None = None,
    query: str | None = None,
    author: str | None = None,
    exclude: str | None = None,
    limit: int | None = Query(default=None, ge=1, le=100),
) -> ListBlogsResponse:
    """List published blogs.

    Filters by tag (optionally excluding one blog), title query or author.
    """
    try:
        return await list_blogs_use_case.execute(
            _listing_request(sort, page, tag, query, author, exclude, limit)
        )
    except NotFoundError:
        # Malformed author id matches nothing
        return ListBlogsResponse(blogs=[])


@router.get("/count", response_model=CountResponse)
async def count_blogs(
    count_blogs_use_case: FromDishka[CountBlogsUseCase],
    tag: str | None = None,
    query: str | None = None,
    author: str | None = None,
) -> CountResponse:
    """Count published blogs for the same filters as the listing."""
    try:
        return await count_blogs_use_case.execute(
            _listing_request(BlogSortOrder.LATEST, 1, tag, query, author, None, None)
        )
    except NotFoundError:
        return CountResponse(total_docs=0)


@router.get("/mine", response_model=UserBlogsResponse)
async def user_blogs(
    user_blogs_use_case: FromDishka[UserBlogsUseCase],
    jwt_service: FromDishka[JWTService],
    draft: bool = False,
    query: str = "",
    page: int = Query(default=1, ge=1),
    deleted_count: int = Query(default=0, ge=0),
    authorization: str | None = Header(default=None),
) -> UserBlogsResponse:
    """List the authenticated user's published blogs or drafts."""
    user_id = require_user_id(jwt_service, authorization, "manage blogs")

    return await user_blogs_use_case.execute(
        UserBlogsRequest(
            user_id=user_id,
            draft=draft,
            query=query,
            page=page,
            deleted_count=deleted_count,
        )
    )


@router.get("/{blog_id}", response_model=GetBlogResponse)
async def get_blog(
    blog_id: str,
    get_blog_use_case: FromDishka[GetBlogUseCase],
    jwt_service: FromDishka[JWTService],
    draft: bool = False,
    mode: Literal["read", "edit"] = "read",
    authorization: str | None = Header(default=None),
) -> GetBlogResponse:
    """Get a blog by its public id.

    Authentication is optional; it is needed to open one's own drafts.

    Raises:
        HTTPException: 404 if the blog does not exist, 403 for someone
            else's draft
    """
    viewer_id = jwt_service.get_user_id_from_header(authorization)

    try:
        return await get_blog_use_case.execute(
            GetBlogRequest(blog_id=blog_id, viewer_id=viewer_id, draft=draft, mode=mode)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except NotAuthorizedError as e:
        logfire.warn("Draft access denied", blog_id=blog_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You can not access draft blogs",
        )


@router.put("/{blog_id}", response_model=UpdateBlogResponse)
async def update_blog(
    blog_id: str,
    request: BlogAPIRequest,
    update_blog_use_case: FromDishka[UpdateBlogUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> UpdateBlogResponse:
    """Edit a blog. Only the author can edit."""
    user_id = require_user_id(jwt_service, authorization, "edit blogs")

    try:
        return await update_blog_use_case.execute(
            UpdateBlogRequest(blog_id=blog_id, user_id=user_id, **request.model_dump())
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized blog update attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to edit this blog",
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/{blog_id}", response_model=DeleteBlogResponse)
async def delete_blog(
    blog_id: str,
    delete_blog_use_case: FromDishka[DeleteBlogUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> DeleteBlogResponse:
    """Delete a blog with its comments and notifications."""
    user_id = require_user_id(jwt_service, authorization, "delete blogs")

    try:
        return await delete_blog_use_case.execute(
            DeleteBlogRequest(blog_id=blog_id, user_id=user_id)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized blog deletion attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to delete this blog",
        )
