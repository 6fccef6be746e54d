"""
In-memory credential store

Process-local tables for running the service without a database. Injected
into InMemoryUnitOfWork rather than reached through a module global, so tests
get a fresh instance each time.
"""

import logging
from typing import Dict
from uuid import UUID

from authgate.domain.entities import User, UserSession

logger = logging.getLogger(__name__)


class MemoryDatabase:
    def __init__(self):
        self.users: Dict[UUID, User] = {}
        # Keyed by owner; the dict key is the one-session-per-user constraint
        self.user_sessions: Dict[UUID, UserSession] = {}

    def clear(self) -> None:
        self.users.clear()
        self.user_sessions.clear()
        logger.info("In-memory database cleared")
