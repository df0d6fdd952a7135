"""
Referral Use Case DTOs (Data Transfer Objects)
"""

from dataclasses import dataclass, field
from typing import List, Optional

from pydantic import BaseModel

from src.domain.entities import Member


@dataclass
class ReferralTree:
    """A member with their direct (level 1) and indirect (level 2) recruits"""

    member: Member
    level1: List[Member] = field(default_factory=list)
    level2: List[Member] = field(default_factory=list)


# ============================================================================
# Response DTOs
# ============================================================================


class RewardAmount(BaseModel):
    """Amount in both payout currencies"""

    syp: int
    usd: int


class RecruitReward(BaseModel):
    """Reward earned for one direct recruit"""

    member_id: str
    full_name: Optional[str]
    position: int
    syp: int
    usd: int


class ReferralRewardsResponse(BaseModel):
    """Response for referral rewards use case"""

    member_id: str
    level1_count: int
    level2_count: int
    level1_total: RewardAmount
    level2_total: RewardAmount
    combined: RewardAmount
    progress_count: int
    per_direct: List[RecruitReward]
