"""
Authentication Use Cases

Sign-up, sign-in, sign-out and access-token refresh.
"""

from .signup_use_case import USERNAME_TAKEN, SignUpUseCase
from .signin_use_case import INVALID_CREDENTIALS, SignInUseCase
from .signout_use_case import SignOutUseCase
from .refresh_access_use_case import RefreshAccessUseCase
from .precheck import ALREADY_SIGNED_IN
from .dtos import (
    AccessRefreshResult,
    AuthResult,
    SignOutResult,
    SignUpCommand,
    UserInfo,
)

__all__ = [
    # Use Cases
    "SignUpUseCase",
    "SignInUseCase",
    "SignOutUseCase",
    "RefreshAccessUseCase",
    # DTOs - Commands
    "SignUpCommand",
    # DTOs - Responses
    "AuthResult",
    "SignOutResult",
    "AccessRefreshResult",
    "UserInfo",
    # Errors
    "ALREADY_SIGNED_IN",
    "USERNAME_TAKEN",
    "INVALID_CREDENTIALS",
]
