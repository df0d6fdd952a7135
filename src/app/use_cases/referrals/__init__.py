"""
Referral Use Cases

Referral network resolution and reward computation.
"""

from .dtos import ReferralRewardsResponse, ReferralTree
from .get_referral_rewards_use_case import GetReferralRewardsUseCase
from .resolve_referrals_use_case import ResolveReferralsUseCase

__all__ = [
    "ResolveReferralsUseCase",
    "GetReferralRewardsUseCase",
    "ReferralTree",
    "ReferralRewardsResponse",
]
