"""
User Entity

Represents a registered account that can sign in.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from .enums import UserLevel


class User(SQLModel, table=True):
    """
    User entity - a registered identity.

    Business Rules:
    - Username must be unique across all users
    - Password stored as bcrypt hash, never returned outward
    - Level defaults to standard on sign-up
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    username: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    first_name: Optional[str] = Field(default=None, max_length=255)
    last_name: Optional[str] = Field(default=None, max_length=255)

    level: UserLevel = Field(default=UserLevel.standard)

    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
