"""
Get Referral Rewards Use Case

Joins a member's approved referral network against the reward table.
"""

from typing import Optional

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import MemberStatus
from src.domain.rewards import (
    MILESTONE_EVERY,
    level_one_reward,
    level_one_total,
    level_two_total,
)

from .dtos import RecruitReward, ReferralRewardsResponse, RewardAmount
from .resolve_referrals_use_case import ResolveReferralsUseCase


class GetReferralRewardsUseCase:
    """
    Use case for computing referral earnings of a member.

    Business Rules:
    - Only approved recruits earn rewards
    - Level 1 rewards depend on recruit position, oldest recruit first
    - Every 50th level 1 recruit adds a milestone bonus
    - Level 2 recruits pay a flat amount each
    - progress_count is the level 1 count towards the next milestone
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, member_id: str, timeout: Optional[float] = None
    ) -> Result[ReferralRewardsResponse]:
        result = await ResolveReferralsUseCase(self.uow).execute(
            member_id, statuses=[MemberStatus.approved.value], timeout=timeout
        )
        if result.is_err():
            return result

        tree = result.value
        oldest_first = list(reversed(tree.level1))

        per_direct = []
        for position, recruit in enumerate(oldest_first, start=1):
            reward = level_one_reward(position)
            per_direct.append(
                RecruitReward(
                    member_id=recruit.id,
                    full_name=recruit.full_name,
                    position=position,
                    syp=reward.syp,
                    usd=reward.usd,
                )
            )

        level1_total = level_one_total(len(oldest_first))
        level2_total = level_two_total(len(tree.level2))
        combined = level1_total + level2_total

        return Return.ok(
            ReferralRewardsResponse(
                member_id=tree.member.id,
                level1_count=len(tree.level1),
                level2_count=len(tree.level2),
                level1_total=RewardAmount(syp=level1_total.syp, usd=level1_total.usd),
                level2_total=RewardAmount(syp=level2_total.syp, usd=level2_total.usd),
                combined=RewardAmount(syp=combined.syp, usd=combined.usd),
                progress_count=len(tree.level1) % MILESTONE_EVERY,
                per_direct=per_direct,
            )
        )
