"""Like routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, status

from penpixel.application.usecase.like import (
    LikeStatusRequest,
    LikeStatusResponse,
    LikeStatusUseCase,
    ToggleLikeRequest,
    ToggleLikeResponse,
    ToggleLikeUseCase,
)
from penpixel.domain.error import NotFoundError, ValidationError
from penpixel.domain.service import JWTService
from penpixel.interface.api.security import require_user_id

router = APIRouter(prefix="/blogs", tags=["likes"], route_class=DishkaRoute)


@router.post("/{blog_id}/like", response_model=ToggleLikeResponse)
async def toggle_like(
    blog_id: str,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> ToggleLikeResponse:
    """Like the blog, or unlike it if already liked.

    Raises:
        HTTPException: 401 if not authenticated, 404 if the blog does not exist
    """
    user_id = require_user_id(jwt_service, authorization, "like blogs")

    try:
        return await toggle_like_use_case.execute(
            ToggleLikeRequest(blog_id=blog_id, user_id=user_id)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/{blog_id}/like", response_model=LikeStatusResponse)
async def like_status(
    blog_id: str,
    like_status_use_case: FromDishka[LikeStatusUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> LikeStatusResponse:
    """Whether the authenticated user likes the blog."""
    user_id = require_user_id(jwt_service, authorization, "check likes")

    try:
        return await like_status_use_case.execute(
            LikeStatusRequest(blog_id=blog_id, user_id=user_id)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
