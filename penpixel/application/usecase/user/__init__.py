"""User use cases."""

from .get_profile import GetProfileRequest, GetProfileUseCase, ProfileResponse
from .search_users import SearchUsersRequest, SearchUsersResponse, SearchUsersUseCase
from .update_profile import (
    UpdateProfileRequest,
    UpdateProfileResponse,
    UpdateProfileUseCase,
)
from .update_profile_img import (
    UpdateProfileImgRequest,
    UpdateProfileImgResponse,
    UpdateProfileImgUseCase,
)

__all__ = [
    "GetProfileRequest",
    "GetProfileUseCase",
    "ProfileResponse",
    "SearchUsersRequest",
    "SearchUsersResponse",
    "SearchUsersUseCase",
    "UpdateProfileImgRequest",
    "UpdateProfileImgResponse",
    "UpdateProfileImgUseCase",
    "UpdateProfileRequest",
    "UpdateProfileResponse",
    "UpdateProfileUseCase",
]
