"""
Unit tests for Get Referral Rewards Use Case
"""

import pytest

from src.app.use_cases.referrals import GetReferralRewardsUseCase
from tests.fixtures.fake_store import FakeUnitOfWork


@pytest.mark.asyncio
async def test_rewards_follow_recruit_order(make_member):
    """Oldest direct recruit earns the first tier"""
    # Arrange
    uow = FakeUnitOfWork(
        [
            make_member("M", invite_code_self="X1"),
            make_member("B1", minute=1, invite_code="X1", invite_code_self="Y1", full_name="First"),
            make_member("B2", minute=2, invite_code="X1", full_name="Second"),
            make_member("C1", minute=3, invite_code="Y1"),
            make_member("P", minute=4, invite_code="X1", status="pending"),
        ]
    )

    # Act
    result = await GetReferralRewardsUseCase(uow).execute("M")

    # Assert
    assert result.is_ok()
    rewards = result.value
    assert rewards.level1_count == 2  # pending recruit earns nothing
    assert rewards.level2_count == 1
    assert [(r.member_id, r.position, r.syp) for r in rewards.per_direct] == [
        ("B1", 1, 500_000),
        ("B2", 2, 600_000),
    ]
    assert rewards.level1_total.syp == 1_100_000
    assert rewards.level2_total.syp == 100_000
    assert rewards.combined.syp == 1_200_000
    assert rewards.combined.usd == 120
    assert rewards.progress_count == 2


@pytest.mark.asyncio
async def test_rewards_for_member_without_recruits(make_member):
    uow = FakeUnitOfWork([make_member("M")])

    result = await GetReferralRewardsUseCase(uow).execute("M")

    assert result.is_ok()
    assert result.value.combined.syp == 0
    assert result.value.per_direct == []


@pytest.mark.asyncio
async def test_rewards_propagate_not_found():
    result = await GetReferralRewardsUseCase(FakeUnitOfWork()).execute("nobody")

    assert result.is_err()
    assert result.error.code == "NOT_FOUND"
