from uuid import uuid4

import pytest
from unittest.mock import AsyncMock, MagicMock

from authgate.app.services.passwords import hash_password
from authgate.domain.entities import User, UserLevel


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    # Mock repositories
    uow.users = MagicMock()
    uow.users.get_by_username = AsyncMock(return_value=None)
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.create = AsyncMock(side_effect=lambda user: user)

    uow.sessions = MagicMock()
    uow.sessions.get_by_user_id = AsyncMock(return_value=None)
    uow.sessions.create = AsyncMock(side_effect=lambda session: session)
    uow.sessions.delete_by_user_id = AsyncMock(return_value=False)

    return uow


@pytest.fixture
def alice():
    return User(
        id=uuid4(),
        username="alice",
        password_hash=hash_password("pw123"),
        first_name="Alice",
        last_name="Liddell",
        level=UserLevel.standard,
    )
