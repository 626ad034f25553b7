"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, Query, status
from pydantic import BaseModel, Field

from penpixel.application.usecase.comment import (
    AddCommentRequest,
    AddCommentResponse,
    AddCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    GetRepliesRequest,
)
from penpixel.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from penpixel.domain.service import JWTService
from penpixel.interface.api.security import require_user_id

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class AddCommentAPIRequest(BaseModel):
    """API request for adding a comment."""

    comment: str = Field(max_length=10000)
    replying_to: str | None = None  # Parent comment ID for replies
    notification_id: str | None = None


@router.post(
    "/blogs/{blog_id}/comments",
    response_model=AddCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    blog_id: str,
    request: AddCommentAPIRequest,
    add_comment_use_case: FromDishka[AddCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> AddCommentResponse:
    """Comment on a blog or reply to another comment.

    Raises:
        HTTPException: 401 if not authenticated, 404 if the blog or parent
            comment does not exist, 400 if the comment is empty
    """
    user_id = require_user_id(jwt_service, authorization, "comment")

    try:
        return await add_comment_use_case.execute(
            AddCommentRequest(
                blog_id=blog_id,
                user_id=user_id,
                comment=request.comment,
                replying_to=request.replying_to,
                notification_id=request.notification_id,
            )
        )
    except NotFoundError as e:
        logfire.warn("Comment creation failed - target not found", error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/blogs/{blog_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    blog_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    skip: int = Query(default=0, ge=0),
) -> GetCommentsResponse:
    """Get a page of a blog's root comments, newest first."""
    try:
        return await get_comments_use_case.execute(
            GetCommentsRequest(blog_id=blog_id, skip=skip)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/comments/{comment_id}/replies", response_model=GetCommentsResponse)
async def get_replies(
    comment_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    skip: int = Query(default=0, ge=0),
) -> GetCommentsResponse:
    """Get a page of replies to a comment, newest first."""
    try:
        return await get_comments_use_case.replies(
            GetRepliesRequest(comment_id=comment_id, skip=skip)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> DeleteCommentResponse:
    """Delete a comment and all of its replies.

    Allowed for the commenter and the blog author.
    """
    user_id = require_user_id(jwt_service, authorization, "delete comments")

    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=comment_id, user_id=user_id)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized comment deletion attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You can not delete this comment",
        )
