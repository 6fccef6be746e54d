from typing import List, Optional, Tuple
from uuid import UUID

from authgate.app.repositories.errors import StorageConflictError
from authgate.app.repositories.session_repository import ISessionRepository
from authgate.app.repositories.user_repository import IUserRepository
from authgate.domain.entities import User, UserSession
from .database import MemoryDatabase

# (table, key, row written or None, row removed or None); replayed backwards on rollback
Journal = List[Tuple[str, UUID, Optional[object], Optional[object]]]


class MemoryUserRepository(IUserRepository):
    """User repository backed by MemoryDatabase"""

    def __init__(self, db: MemoryDatabase, journal: Optional[Journal] = None):
        self.db = db
        self.journal = journal if journal is not None else []

    async def get_by_username(self, username: str) -> Optional[User]:
        for user in self.db.users.values():
            if user.username == username:
                return user
        return None

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        return self.db.users.get(user_id)

    async def create(self, user: User) -> User:
        if any(u.username == user.username for u in self.db.users.values()):
            raise StorageConflictError("Username already exists")
        self.db.users[user.id] = user
        self.journal.append(("users", user.id, user, None))
        return user


class MemorySessionRepository(ISessionRepository):
    """Session repository backed by MemoryDatabase"""

    def __init__(self, db: MemoryDatabase, journal: Optional[Journal] = None):
        self.db = db
        self.journal = journal if journal is not None else []

    async def get_by_user_id(self, user_id: UUID) -> Optional[UserSession]:
        return self.db.user_sessions.get(user_id)

    async def create(self, session: UserSession) -> UserSession:
        if session.user_id in self.db.user_sessions:
            raise StorageConflictError("User already has a session")
        self.db.user_sessions[session.user_id] = session
        self.journal.append(("user_sessions", session.user_id, session, None))
        return session

    async def delete_by_user_id(self, user_id: UUID) -> bool:
        removed = self.db.user_sessions.pop(user_id, None)
        if removed is None:
            return False
        self.journal.append(("user_sessions", user_id, None, removed))
        return True
