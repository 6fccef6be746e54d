import logging
from typing import Optional

from authgate.libs.result import Error, Result, Return
from authgate.app.repositories.errors import StorageConflictError, StorageError
from authgate.app.services.passwords import hash_password
from authgate.app.services.token_codec import public_claims
from authgate.app.services.unit_of_work import UnitOfWork
from authgate.app.use_cases.sessions.session_manager import SessionManager
from authgate.domain.entities import User, UserLevel
from .dtos import AuthResult, SignUpCommand, UserInfo
from .precheck import ALREADY_SIGNED_IN, is_already_signed_in

logger = logging.getLogger(__name__)

USERNAME_TAKEN = Error("USERNAME_TAKEN", "Username is already taken")


class SignUpUseCase:
    """
    Sign-Up Use Case

    Business Logic:
    1. Reject callers whose refresh token maps to a live session
    2. Reject a username that already exists
    3. Hash password with bcrypt and create the user at level standard
    4. Open the user's session (access + refresh token pair)
    5. Commit and return the public user record with the tokens
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, command: SignUpCommand, presented_refresh_token: Optional[str] = None
    ) -> Result[AuthResult]:
        """
        Execute sign-up use case

        Args:
            command: SignUpCommand with validated username, password, profile
            presented_refresh_token: Refresh cookie sent by the caller, if any

        Returns:
            Result[AuthResult], or Error(ALREADY_SIGNED_IN | USERNAME_TAKEN |
            SESSION_CONFLICT | STORAGE_FAILURE)
        """
        async with self.uow:
            try:
                if await is_already_signed_in(self.uow, presented_refresh_token):
                    return Return.err(ALREADY_SIGNED_IN)

                existing_user = await self.uow.users.get_by_username(command.username)
                if existing_user:
                    return Return.err(USERNAME_TAKEN)

                user = User(
                    username=command.username,
                    password_hash=hash_password(command.password),
                    first_name=command.first_name,
                    last_name=command.last_name,
                    level=UserLevel.standard,
                )
                try:
                    user = await self.uow.users.create(user)
                except StorageConflictError:
                    # Lost a race with another sign-up for the same username
                    return Return.err(USERNAME_TAKEN)

                opened = await SessionManager(self.uow).open_session(user)
                if opened.is_err():
                    return Return.err(opened.error)

                await self.uow.commit()
            except StorageError:
                logger.exception("Sign-up failed in the credential store")
                return Return.err(Error("STORAGE_FAILURE", "Could not complete sign-up"))

            logger.info(f"User {user.id} signed up")
            return Return.ok(
                AuthResult(
                    message=f"Welcome {user.username}! You are now signed up.",
                    user=UserInfo(**public_claims(user)),
                    tokens=opened.value,
                )
            )
