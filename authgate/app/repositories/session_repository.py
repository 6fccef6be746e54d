from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from authgate.domain.entities import UserSession


class ISessionRepository(ABC):
    """Session repository interface - application layer

    Only stores that hold identities implement this; it is composed next to
    IUserRepository in the unit of work rather than folded into it.
    """

    @abstractmethod
    async def get_by_user_id(self, user_id: UUID) -> Optional[UserSession]:
        """Get the session owned by a user, if any"""
        pass

    @abstractmethod
    async def create(self, session: UserSession) -> UserSession:
        """Create a new session. Raises StorageConflictError if the user already has one."""
        pass

    @abstractmethod
    async def delete_by_user_id(self, user_id: UUID) -> bool:
        """Delete the session owned by a user. Returns True if a row was removed."""
        pass
