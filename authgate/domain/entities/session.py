"""
UserSession Entity

Server-side record asserting that a user is currently signed in.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel


class UserSession(SQLModel, table=True):
    """
    UserSession entity - at most one row per user.

    Business Rules:
    - user_id is unique; a second concurrent insert fails in storage
    - secret is the signature segment of the refresh token issued with it
    - Deleting the row revokes the refresh token even before it expires
    """

    __tablename__ = "user_sessions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(foreign_key="users.id", nullable=False, unique=True, index=True)
    secret: str = Field(max_length=128)

    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
