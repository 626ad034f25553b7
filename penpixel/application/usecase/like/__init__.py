"""Like use cases."""

from .like_status import LikeStatusRequest, LikeStatusResponse, LikeStatusUseCase
from .toggle_like import ToggleLikeRequest, ToggleLikeResponse, ToggleLikeUseCase

__all__ = [
    "LikeStatusRequest",
    "LikeStatusResponse",
    "LikeStatusUseCase",
    "ToggleLikeRequest",
    "ToggleLikeResponse",
    "ToggleLikeUseCase",
]
