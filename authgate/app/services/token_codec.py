"""
Token Codec

Signs and verifies the two token classes. Access and refresh tokens are
HS256 JWTs signed with different secrets, so holding one class's key never
lets anyone mint the other class.
"""

from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import uuid4

from jose import JWTError, jwt

from config import ApplicationConfig
from authgate.domain.entities import TokenType, User

_ALGORITHM = "HS256"

_IDENTITY_CLAIMS = ("id", "username", "first_name", "last_name", "level")


def _secret_for(token_type: TokenType) -> str:
    if token_type == TokenType.access:
        return ApplicationConfig.ACCESS_TOKEN_SECRET
    return ApplicationConfig.REFRESH_TOKEN_SECRET


def _default_lifetime(token_type: TokenType) -> timedelta:
    if token_type == TokenType.access:
        return timedelta(seconds=ApplicationConfig.ACCESS_TOKEN_TTL_SECONDS)
    return timedelta(seconds=ApplicationConfig.REFRESH_TOKEN_TTL_SECONDS)


def public_claims(user: User) -> dict:
    """Identity payload carried by tokens and returned outward (no password hash)."""
    return {
        "id": str(user.id),
        "username": user.username,
        "first_name": user.first_name,
        "last_name": user.last_name,
        "level": int(user.level),
    }


def generate_token(
    token_type: TokenType, user: User, expires_delta: Optional[timedelta] = None
) -> str:
    """
    Generate a signed token for a user

    Args:
        token_type: access (1 hour by default) or refresh (30 days by default)
        user: User the token asserts
        expires_delta: Override of the class lifetime

    Returns:
        JWT token string (HS256)
    """
    now = datetime.now(UTC)
    lifetime = expires_delta if expires_delta is not None else _default_lifetime(token_type)
    payload = {
        **public_claims(user),
        "token_type": token_type.value,
        "jti": uuid4().hex,
        "iat": now,
        "exp": now + lifetime,
    }
    return jwt.encode(payload, _secret_for(token_type), algorithm=_ALGORITHM)


def verify_token(token_type: TokenType, token: Optional[str]) -> Optional[dict]:
    """
    Verify and decode a token of the given class

    Args:
        token_type: Class the token is expected to belong to
        token: JWT token string, possibly missing or malformed

    Returns:
        Decoded payload dict, or None if the token is empty, malformed,
        expired, signed with another key, or of the other class
    """
    if not token or not isinstance(token, str):
        return None

    try:
        payload = jwt.decode(token, _secret_for(token_type), algorithms=[_ALGORITHM])
    except JWTError:
        return None

    if payload.get("token_type") != token_type.value:
        return None
    if any(claim not in payload for claim in _IDENTITY_CLAIMS):
        return None

    return payload


def token_signature(token: str) -> str:
    """Signature segment of a JWT, persisted as the session secret."""
    return token.rsplit(".", 1)[-1]
