from .database import MemoryDatabase
from .repositories import MemorySessionRepository, MemoryUserRepository
from .unit_of_work import InMemoryUnitOfWork

__all__ = [
    "MemoryDatabase",
    "MemoryUserRepository",
    "MemorySessionRepository",
    "InMemoryUnitOfWork",
]
