"""
Update Member Status Use Case

Single-record status change from the member detail screen.
"""

from typing import Optional

from libs.result import Error, Result, Return
from src.app.repositories.errors import StoreError
from src.app.services.store_call import bounded
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Member

from .dtos import ACTION_STATUSES


class UpdateMemberStatusUseCase:
    """
    Use case for approving, rejecting or deleting one member.

    Business Rules:
    - approve / reject / delete map to approved / rejected / deleted
    - Any other action is stored as the status itself
    - delete only changes status; the row stays
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, member_id: str, action: str, timeout: Optional[float] = None
    ) -> Result[Member]:
        if not member_id or not str(member_id).strip():
            return Return.err(Error("INVALID_ARGUMENT", "Member id is required"))
        if not action or not action.strip():
            return Return.err(Error("INVALID_ARGUMENT", "Action is required"))

        action = action.strip()
        status = ACTION_STATUSES.get(action, action)

        async with self.uow:
            try:
                member = await bounded(self.uow.members.get_by_id(member_id), timeout)
                if member is None:
                    return Return.err(Error("NOT_FOUND", f"Member {member_id} not found"))

                member.status = status
                member = await bounded(self.uow.members.update(member), timeout)
                await bounded(self.uow.commit(), timeout)
            except StoreError as exc:
                return Return.err(Error("STORE_ERROR", str(exc)))

        return Return.ok(member)
