"""
Authentication Use Case DTOs (Data Transfer Objects)

Command and Response classes for the auth domain.
"""

from typing import Optional

from pydantic import BaseModel

from authgate.app.use_cases.sessions.dtos import TokenPair


# ============================================================================
# Command DTOs
# ============================================================================


class SignUpCommand(BaseModel):
    """
    Sign-up command - validated sign-up intent

    Created by the API layer after request validation passes.
    """

    username: str
    password: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class UserInfo(BaseModel):
    """Public user record; never carries the password hash"""

    id: str
    username: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    level: int


class AuthResult(BaseModel):
    """
    Result of sign-up and sign-in

    Tokens travel back to the route, which writes them as cookies; they are
    not part of the HTTP body.
    """

    message: str
    user: UserInfo
    tokens: TokenPair


class SignOutResult(BaseModel):
    """Result of sign-out; signed_out is False for the no-op path"""

    signed_out: bool
    message: str


class AccessRefreshResult(BaseModel):
    """Result of re-minting an access token from a live refresh token"""

    message: str
    user: UserInfo
    access_token: str
