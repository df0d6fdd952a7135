"""
Select Member Use Case

Marks or unmarks one member for a follow-up action such as a payout batch.
"""

from typing import Optional

from libs.result import Error, Result, Return
from src.app.repositories.errors import StoreError
from src.app.services.store_call import bounded
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Member


class SelectMemberUseCase:
    """Set the selected flag of a single member; status is left untouched."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, member_id: str, selected: bool, timeout: Optional[float] = None
    ) -> Result[Member]:
        if not member_id or not str(member_id).strip():
            return Return.err(Error("INVALID_ARGUMENT", "Member id is required"))

        async with self.uow:
            try:
                member = await bounded(self.uow.members.get_by_id(member_id), timeout)
                if member is None:
                    return Return.err(Error("NOT_FOUND", f"Member {member_id} not found"))

                member.invited_selected = bool(selected)
                member = await bounded(self.uow.members.update(member), timeout)
                await bounded(self.uow.commit(), timeout)
            except StoreError as exc:
                return Return.err(Error("STORE_ERROR", str(exc)))

        return Return.ok(member)
