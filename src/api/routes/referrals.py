"""
Referral API Routes

Handles referral network and referral reward endpoints.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel

from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.referrals import (
    GetReferralRewardsUseCase,
    ReferralRewardsResponse,
    ResolveReferralsUseCase,
)
from src.depends import get_store_timeout, get_unit_of_work

router = APIRouter(prefix="/referrals", tags=["Referrals"])


class ReferralLevelsResponse(BaseModel):
    """Direct and indirect recruits"""

    level1: List[Dict[str, Any]]
    level2: List[Dict[str, Any]]


class ReferralTreeResponse(BaseModel):
    """GET /referrals/{member_id} response payload"""

    member: Dict[str, Any]
    referrals: ReferralLevelsResponse


@router.get(
    "/{member_id}",
    status_code=status.HTTP_200_OK,
    response_model=ReferralTreeResponse,
)
async def get_referral_tree(
    member_id: str,
    status_filter: List[str] = Query(
        [], alias="status", description="Only list referrals in these statuses"
    ),
    uow: UnitOfWork = Depends(get_unit_of_work),
    timeout: float = Depends(get_store_timeout),
):
    """
    Get Referral Tree

    Returns the member with their level 1 recruits (joined with the member's
    own invite code) and level 2 recruits (joined with a level 1 member's code),
    each ordered newest first.

    Raises:
        - 400 Bad Request: INVALID_ARGUMENT
        - 404 Not Found: NOT_FOUND
        - 500 Internal Server Error: STORE_ERROR
    """
    use_case = ResolveReferralsUseCase(uow)
    result = await use_case.execute(
        member_id, statuses=status_filter or None, timeout=timeout
    )

    if result.is_err():
        raise_for_error(result.error)

    tree = result.value
    return ReferralTreeResponse(
        member=tree.member.as_row(),
        referrals=ReferralLevelsResponse(
            level1=[row.as_row() for row in tree.level1],
            level2=[row.as_row() for row in tree.level2],
        ),
    )


@router.get(
    "/{member_id}/rewards",
    status_code=status.HTTP_200_OK,
    response_model=ReferralRewardsResponse,
)
async def get_referral_rewards(
    member_id: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
    timeout: float = Depends(get_store_timeout),
):
    """
    Get Referral Rewards

    Computes level 1 and level 2 earnings over approved recruits.

    Raises:
        - 404 Not Found: NOT_FOUND
        - 500 Internal Server Error: STORE_ERROR
    """
    use_case = GetReferralRewardsUseCase(uow)
    result = await use_case.execute(member_id, timeout=timeout)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
