"""
Session Manager

Enforces at most one active session per user.
"""

import hmac
import logging
from typing import Optional
from uuid import UUID

from authgate.libs.result import Error, Result, Return
from authgate.app.repositories.errors import StorageConflictError
from authgate.app.services.token_codec import generate_token, token_signature
from authgate.app.services.unit_of_work import UnitOfWork
from authgate.domain.entities import TokenType, User, UserSession
from .dtos import TokenPair

logger = logging.getLogger(__name__)

SESSION_CONFLICT = Error(
    "SESSION_CONFLICT", "User already has an active session; sign out first"
)


class SessionManager:
    """
    Session lifecycle per user.

    State machine:
    - NoSession --open_session--> Active
    - Active --close_session--> NoSession
    - Active --replace_session--> Active' (old refresh secret invalidated)

    open_session while Active is a SESSION_CONFLICT. The check-then-insert in
    open_session is racy on its own; the unique user_id on user_sessions makes
    the losing insert fail with StorageConflictError, which is reported as the
    same conflict.

    Runs inside the caller's unit of work and never commits.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def has_active_session(self, user_id: UUID) -> Optional[UserSession]:
        return await self.uow.sessions.get_by_user_id(user_id)

    async def open_session(self, user: User) -> Result[TokenPair]:
        """
        Issue a token pair and persist the session that backs it.

        Returns:
            Result with TokenPair, or Error(SESSION_CONFLICT)
        """
        if await self.has_active_session(user.id) is not None:
            return Return.err(SESSION_CONFLICT)

        access_token = generate_token(TokenType.access, user)
        refresh_token = generate_token(TokenType.refresh, user)

        try:
            await self.uow.sessions.create(
                UserSession(user_id=user.id, secret=token_signature(refresh_token))
            )
        except StorageConflictError:
            logger.warning(f"Concurrent session insert rejected for user {user.id}")
            return Return.err(SESSION_CONFLICT)

        logger.info(f"Session opened for user {user.id}")
        return Return.ok(
            TokenPair(access_token=access_token, refresh_token=refresh_token)
        )

    async def close_session(self, user_id: UUID) -> bool:
        """Delete the user's session. Closing when none exists is not an error."""
        removed = await self.uow.sessions.delete_by_user_id(user_id)
        if removed:
            logger.info(f"Session closed for user {user_id}")
        return removed

    async def replace_session(self, user: User) -> Result[TokenPair]:
        """Drop a stale session row and open a fresh one."""
        if await self.uow.sessions.delete_by_user_id(user.id):
            logger.info(f"Stale session replaced for user {user.id}")
        return await self.open_session(user)

    @staticmethod
    def is_current_secret(session: UserSession, refresh_token: str) -> bool:
        """True if the refresh token is the one the session was opened with."""
        return hmac.compare_digest(session.secret, token_signature(refresh_token))
