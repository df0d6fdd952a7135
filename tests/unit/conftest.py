from datetime import datetime, timedelta

import pytest
from unittest.mock import AsyncMock, MagicMock

from src.domain.entities import Member, MemberStatus

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


@pytest.fixture
def make_member():
    """Build an approved Member created `minute` minutes after BASE_TIME"""

    def _make(member_id: str, minute: int = 0, **fields) -> Member:
        fields.setdefault("status", MemberStatus.approved.value)
        return Member(
            id=member_id,
            created_at=BASE_TIME + timedelta(minutes=minute),
            **fields,
        )

    return _make
