"""
Sign-In Use Case

Authenticates a username/password pair and opens the user's session.
"""

import logging
from typing import Optional

from authgate.libs.result import Error, Result, Return
from authgate.app.repositories.errors import StorageError
from authgate.app.services.passwords import burn_password_check, verify_password
from authgate.app.services.token_codec import public_claims
from authgate.app.services.unit_of_work import UnitOfWork
from authgate.app.use_cases.sessions.session_manager import SessionManager
from .dtos import AuthResult, UserInfo
from .precheck import ALREADY_SIGNED_IN, is_already_signed_in

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = Error("INVALID_CREDENTIALS", "Invalid username or password")


class SignInUseCase:
    """
    Use case for sign-in and token issuance.

    Business Rules:
    - A caller whose refresh token maps to a live session is rejected
    - Unknown username and wrong password give the same error and cost
    - A session row left behind by a client that lost its cookies is replaced
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        username: str,
        password: str,
        presented_refresh_token: Optional[str] = None,
    ) -> Result[AuthResult]:
        async with self.uow:
            try:
                if await is_already_signed_in(self.uow, presented_refresh_token):
                    return Return.err(ALREADY_SIGNED_IN)

                user = await self.uow.users.get_by_username(username)

                if user is None:
                    burn_password_check(password)
                    return Return.err(INVALID_CREDENTIALS)

                if not verify_password(password, user.password_hash):
                    return Return.err(INVALID_CREDENTIALS)

                manager = SessionManager(self.uow)
                if await manager.has_active_session(user.id) is not None:
                    opened = await manager.replace_session(user)
                else:
                    opened = await manager.open_session(user)

                if opened.is_err():
                    return Return.err(opened.error)

                await self.uow.commit()
            except StorageError:
                logger.exception("Sign-in failed in the credential store")
                return Return.err(Error("STORAGE_FAILURE", "Could not complete sign-in"))

            logger.info(f"User {user.id} signed in")
            return Return.ok(
                AuthResult(
                    message=f"Welcome {user.username}! You are signed in.",
                    user=UserInfo(**public_claims(user)),
                    tokens=opened.value,
                )
            )
