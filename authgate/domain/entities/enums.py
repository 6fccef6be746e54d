"""
Session Gate Domain Enums

Enumeration types used across domain entities and token claims.
"""

from enum import Enum, IntEnum


class UserLevel(IntEnum):
    """Authorization tier attached to a user"""

    standard = 0
    privileged = 1


class TokenType(str, Enum):
    """Token class; the value doubles as the cookie name"""

    access = "access"
    refresh = "refresh"
