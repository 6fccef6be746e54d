import logging
from typing import Optional
from uuid import UUID

from authgate.libs.result import Error, Result, Return
from authgate.app.repositories.errors import StorageError
from authgate.app.services.token_codec import verify_token
from authgate.app.services.unit_of_work import UnitOfWork
from authgate.app.use_cases.sessions.session_manager import SessionManager
from authgate.domain.entities import TokenType
from .dtos import SignOutResult

logger = logging.getLogger(__name__)


class SignOutUseCase:
    """
    Sign-Out Use Case

    Without both tokens and a verifiable refresh token there is nothing to
    close, and the call succeeds as a no-op: "already signed out" and "never
    signed in" look the same to the caller.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, access_token: Optional[str], refresh_token: Optional[str]
    ) -> Result[SignOutResult]:
        claims = verify_token(TokenType.refresh, refresh_token)
        if not (access_token and refresh_token and claims):
            return Return.ok(
                SignOutResult(signed_out=False, message="You are already signed out.")
            )

        async with self.uow:
            try:
                await SessionManager(self.uow).close_session(UUID(claims["id"]))
                await self.uow.commit()
            except StorageError:
                logger.exception("Sign-out failed in the credential store")
                return Return.err(Error("STORAGE_FAILURE", "Could not complete sign-out"))

        return Return.ok(
            SignOutResult(
                signed_out=True,
                message=f"You have successfully signed out! See you soon {claims['username']}!",
            )
        )
