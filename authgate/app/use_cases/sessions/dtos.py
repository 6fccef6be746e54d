"""
Session Use Case DTOs
"""

from pydantic import BaseModel


class TokenPair(BaseModel):
    """Access and refresh tokens issued together when a session opens"""

    access_token: str
    refresh_token: str


class CloseSessionResponse(BaseModel):
    """Response for closing another user's session"""

    user_id: str
    revoked: bool
