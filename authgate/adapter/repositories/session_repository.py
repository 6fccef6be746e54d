from typing import Optional
from uuid import UUID

from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from authgate.app.repositories.errors import StorageConflictError, StorageError
from authgate.app.repositories.session_repository import ISessionRepository
from authgate.domain.entities import UserSession


class SessionRepository(ISessionRepository):
    """Session repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_user_id(self, user_id: UUID) -> Optional[UserSession]:
        """Get the session owned by a user"""
        stmt = select(UserSession).where(UserSession.user_id == user_id)
        try:
            result = await self.session.exec(stmt)
            return result.one_or_none()
        except SQLAlchemyError as e:
            raise StorageError("Error getting session by user id") from e

    async def create(self, session_obj: UserSession) -> UserSession:
        """
        Create a new session.

        The unique index on user_id turns a concurrent second insert for the
        same user into an IntegrityError, reported as StorageConflictError.
        """
        self.session.add(session_obj)
        try:
            await self.session.flush()
            await self.session.refresh(session_obj)
        except IntegrityError as e:
            await self.session.rollback()
            raise StorageConflictError("User already has a session") from e
        except SQLAlchemyError as e:
            raise StorageError("Error creating session") from e
        return session_obj

    async def delete_by_user_id(self, user_id: UUID) -> bool:
        """Delete the session owned by a user"""
        stmt = delete(UserSession).where(UserSession.user_id == user_id)
        try:
            result = await self.session.execute(stmt)
            await self.session.flush()
        except SQLAlchemyError as e:
            raise StorageError("Error deleting session for user") from e
        return result.rowcount > 0
