"""
Use Cases

Organized into domain folders:
- referrals/: Referral network resolution and rewards
- members/: Member administration (listing, batch and single updates)
"""

from .members import (
    ApplyBatchUseCase,
    ListMembersUseCase,
    SelectMemberUseCase,
    UpdateMemberStatusUseCase,
)
from .referrals import (
    GetReferralRewardsUseCase,
    ResolveReferralsUseCase,
)

__all__ = [
    # Referrals
    "ResolveReferralsUseCase",
    "GetReferralRewardsUseCase",
    # Members
    "ListMembersUseCase",
    "ApplyBatchUseCase",
    "UpdateMemberStatusUseCase",
    "SelectMemberUseCase",
]
