"""
Resolve Referrals Use Case

Builds the two-level referral network of a member from invite codes.
"""

from typing import Iterable, List, Optional, Sequence, Set, Tuple

from libs.result import Error, Result, Return
from src.app.repositories.errors import StoreError
from src.app.services.store_call import bounded
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Member
from src.domain.invite_code import collect_invite_codes, resolve_own_invite_code

from .dtos import ReferralTree


def _unique(rows: Iterable[Member], exclude: Set[str]) -> List[Member]:
    unique = []
    seen = set(exclude)
    for row in rows:
        if row.id in seen:
            continue
        seen.add(row.id)
        unique.append(row)
    return unique


class ResolveReferralsUseCase:
    """
    Use case for resolving who a member recruited, two levels deep.

    Business Rules:
    - Level 1: members whose invite_code matches the member's own invite code
      (trimmed, case-insensitive)
    - Level 2: members whose invite_code is the own code of any level 1 member
    - The own code is read through the invite code aliases of the row
    - A member without an own code has no referrals (not an error)
    - Both levels ordered by created_at DESC, id ASC
    - Exactly two levels, never deeper
    - The member is never listed as their own referral, and a level 1 member is
      never listed again at level 2 (guards against referral cycles)
    - Any store failure fails the whole resolution; no partial tree
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        member_id: str,
        statuses: Optional[Sequence[str]] = None,
        timeout: Optional[float] = None,
    ) -> Result[ReferralTree]:
        """
        Execute resolve referrals use case.

        Args:
            member_id: ID of the member whose network is resolved
            statuses: Only list referrals in these statuses (None lists all)
            timeout: Seconds allowed for each store round trip

        Returns:
            Result with ReferralTree, or Error
            (INVALID_ARGUMENT, NOT_FOUND, STORE_ERROR)
        """
        if member_id is None or not str(member_id).strip():
            return Return.err(Error("INVALID_ARGUMENT", "Member id is required"))

        async with self.uow:
            try:
                member = await bounded(self.uow.members.get_by_id(member_id), timeout)
                if member is None:
                    return Return.err(Error("NOT_FOUND", f"Member {member_id} not found"))

                level1, level2 = await self._resolve_levels(member, statuses, timeout)
            except StoreError as exc:
                return Return.err(Error("STORE_ERROR", str(exc)))

        return Return.ok(ReferralTree(member=member, level1=level1, level2=level2))

    async def _resolve_levels(
        self,
        member: Member,
        statuses: Optional[Sequence[str]],
        timeout: Optional[float],
    ) -> Tuple[List[Member], List[Member]]:
        self_code = resolve_own_invite_code(member.as_row())
        if self_code is None:
            return [], []

        direct = await bounded(
            self.uow.members.list_by_used_code(self_code, statuses), timeout
        )
        level1 = _unique(direct, exclude={member.id})

        codes = collect_invite_codes(row.as_row() for row in level1)
        if not codes:
            return level1, []

        indirect = await bounded(
            self.uow.members.list_by_used_codes(codes, statuses), timeout
        )
        level2 = _unique(indirect, exclude={member.id, *(row.id for row in level1)})

        return level1, level2
