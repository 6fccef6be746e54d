"""
Refresh Access Use Case

Re-mints an access token for a caller holding a live refresh token.
"""

from typing import Optional
from uuid import UUID

from authgate.libs.result import Error, Result, Return
from authgate.app.repositories.errors import StorageError
from authgate.app.services.token_codec import generate_token, public_claims, verify_token
from authgate.app.services.unit_of_work import UnitOfWork
from authgate.app.use_cases.sessions.session_manager import SessionManager
from authgate.domain.entities import TokenType
from .dtos import AccessRefreshResult, UserInfo


class RefreshAccessUseCase:
    """
    Business Rules:
    - Refresh token must verify (signature, class, expiry)
    - The user's session must still exist and hold this token's signature,
      so signed-out and superseded refresh tokens are refused
    - Claims are rebuilt from the stored user, picking up level changes
    - The refresh token is not rotated; the session is unchanged
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, refresh_token: Optional[str]) -> Result[AccessRefreshResult]:
        claims = verify_token(TokenType.refresh, refresh_token)
        if claims is None:
            return Return.err(Error("INVALID_TOKEN", "Invalid or expired refresh token"))

        async with self.uow:
            try:
                user_id = UUID(claims["id"])
                session = await SessionManager(self.uow).has_active_session(user_id)
                if session is None or not SessionManager.is_current_secret(
                    session, refresh_token
                ):
                    return Return.err(
                        Error("INVALID_SESSION", "Session has been revoked or superseded")
                    )

                user = await self.uow.users.get_by_id(user_id)
                if user is None:
                    return Return.err(Error("INVALID_SESSION", "Session owner no longer exists"))

                return Return.ok(
                    AccessRefreshResult(
                        message="Access token refreshed",
                        user=UserInfo(**public_claims(user)),
                        access_token=generate_token(TokenType.access, user),
                    )
                )
            except StorageError:
                return Return.err(Error("STORAGE_FAILURE", "Could not refresh access token"))
