from authgate.app.services.unit_of_work import UnitOfWork
from .database import MemoryDatabase
from .repositories import Journal, MemorySessionRepository, MemoryUserRepository


class InMemoryUnitOfWork(UnitOfWork):
    """
    UnitOfWork over MemoryDatabase.

    Writes apply immediately and are journaled; rollback undoes this unit's
    uncommitted writes in reverse order and commit forgets them. Rows
    written by other units are left alone.
    """

    def __init__(self, db: MemoryDatabase):
        self.db = db
        self._journal: Journal = []

    async def __aenter__(self):
        self._journal = []
        self.users = MemoryUserRepository(self.db, self._journal)
        self.sessions = MemorySessionRepository(self.db, self._journal)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        self._journal.clear()

    async def rollback(self):
        while self._journal:
            table, key, written, removed = self._journal.pop()
            rows = getattr(self.db, table)
            if written is not None and rows.get(key) is written:
                del rows[key]
            if removed is not None:
                rows.setdefault(key, removed)
