"""Authentication use cases."""

from .change_password import (
    ChangePasswordRequest,
    ChangePasswordResponse,
    ChangePasswordUseCase,
)
from .signin import SigninRequest, SigninUseCase
from .signup import AuthResponse, SignupRequest, SignupUseCase

__all__ = [
    "AuthResponse",
    "ChangePasswordRequest",
    "ChangePasswordResponse",
    "ChangePasswordUseCase",
    "SigninRequest",
    "SigninUseCase",
    "SignupRequest",
    "SignupUseCase",
]
