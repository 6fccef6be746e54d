from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession

from authgate.adapter.repositories.session_repository import SessionRepository
from authgate.adapter.repositories.user_repository import UserRepository
from authgate.app.repositories.errors import StorageConflictError, StorageError
from authgate.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.sessions = SessionRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise StorageConflictError("Commit rejected by a uniqueness constraint") from e
        except SQLAlchemyError as e:
            raise StorageError("Error committing transaction") from e

    async def rollback(self):
        await self.session.rollback()
