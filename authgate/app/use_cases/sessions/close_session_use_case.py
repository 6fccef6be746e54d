"""
Close User Session Use Case

Force sign-out of a user by a privileged caller.
"""

from uuid import UUID

from authgate.libs.result import Error, Result, Return
from authgate.app.repositories.errors import StorageError
from authgate.app.services.unit_of_work import UnitOfWork
from .dtos import CloseSessionResponse
from .session_manager import SessionManager


class CloseUserSessionUseCase:
    """
    Business Rules:
    - Idempotent: closing a user with no session succeeds with revoked=False
    - The user's outstanding refresh token stops working immediately
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[CloseSessionResponse]:
        async with self.uow:
            try:
                revoked = await SessionManager(self.uow).close_session(user_id)
                await self.uow.commit()
            except StorageError:
                return Return.err(
                    Error("STORAGE_FAILURE", "Could not close session")
                )

            return Return.ok(CloseSessionResponse(user_id=str(user_id), revoked=revoked))
