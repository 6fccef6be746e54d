"""
Session Gate Domain Entities

Each entity in its own file.
"""

from .enums import TokenType, UserLevel
from .user import User
from .session import UserSession

__all__ = [
    # Enums
    "TokenType",
    "UserLevel",
    # Entities
    "User",
    "UserSession",
]
