"""
Authorization Gate

FastAPI dependency that lets a request through only with a valid access
token at the required level. Every rejection is a 404 so that callers
without access cannot tell a protected route from a missing one.
"""

import logging
from typing import Awaitable, Callable, Optional

from fastapi import Request, status

from authgate.app.services.token_codec import verify_token
from authgate.domain.entities import TokenType, UserLevel
from authgate.api.error import NOT_FOUND, ClientError

logger = logging.getLogger(__name__)

# Called with the verified refresh claims when the access token fails to
# verify but the refresh token is live. Returns the claims to proceed
# with, or None to reject.
ExpiredAccessHandler = Callable[[Request, dict], Awaitable[Optional[dict]]]


async def reject_expired_access(request: Request, refresh_claims: dict) -> Optional[dict]:
    """Default handler: no silent refresh; the client calls POST /refresh."""
    logger.debug(
        f"Access token rejected for user {refresh_claims.get('id')}; refresh token still valid"
    )
    return None


def _deny(reason: str) -> ClientError:
    logger.debug(f"Authorization denied: {reason}")
    return ClientError(NOT_FOUND, status_code=status.HTTP_404_NOT_FOUND)


def authorize(
    required_level: UserLevel,
    on_expired_access: ExpiredAccessHandler = reject_expired_access,
):
    """
    Build a dependency that guards a route for one user level.

    Args:
        required_level: Level the caller's token must carry
        on_expired_access: Hook for callers whose access token failed to
            verify while their refresh token is valid

    Returns:
        Dependency returning the verified identity claims; the claims are
        also attached to request.state.identity
    """

    async def gate(request: Request) -> dict:
        access_token = request.cookies.get(TokenType.access.value)
        if not access_token:
            raise _deny("no access token")

        identity = verify_token(TokenType.access, access_token)
        if identity is None:
            refresh_claims = verify_token(
                TokenType.refresh, request.cookies.get(TokenType.refresh.value)
            )
            if refresh_claims is None:
                raise _deny("invalid access token and no valid refresh token")

            identity = await on_expired_access(request, refresh_claims)
            if identity is None:
                raise _deny("access token expired")

        if identity.get("level") != required_level:
            raise _deny(f"level {identity.get('level')} does not match {int(required_level)}")

        request.state.identity = identity
        return identity

    return gate
