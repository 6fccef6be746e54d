from typing import Optional
from uuid import UUID

from authgate.libs.result import Error
from authgate.app.services.token_codec import verify_token
from authgate.app.services.unit_of_work import UnitOfWork
from authgate.app.use_cases.sessions.session_manager import SessionManager
from authgate.domain.entities import TokenType

ALREADY_SIGNED_IN = Error(
    "ALREADY_SIGNED_IN",
    "You are already signed in. Please sign out before taking this action",
)


async def is_already_signed_in(
    uow: UnitOfWork, presented_refresh_token: Optional[str]
) -> bool:
    """True if the caller's refresh token resolves to a user with a live session."""
    claims = verify_token(TokenType.refresh, presented_refresh_token)
    if claims is None:
        return False

    try:
        user_id = UUID(claims["id"])
    except ValueError:
        return False

    return await SessionManager(uow).has_active_session(user_id) is not None
