"""
Session Use Cases
"""

from .session_manager import SESSION_CONFLICT, SessionManager
from .close_session_use_case import CloseUserSessionUseCase
from .dtos import CloseSessionResponse, TokenPair

__all__ = [
    "SessionManager",
    "SESSION_CONFLICT",
    "CloseUserSessionUseCase",
    "TokenPair",
    "CloseSessionResponse",
]
