"""
Apply Batch Use Case

Applies one status or selected-flag change to a set of members.
"""

from typing import Any, Dict, Iterable, Optional

from libs.result import Error, Result, Return
from src.app.repositories.errors import StoreError
from src.app.services.store_call import bounded
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import MemberStatus

from .dtos import BatchTarget, BatchUpdateResult


class ApplyBatchUseCase:
    """
    Use case for batch member updates from admin tooling.

    Business Logic:
    1. Validate the id set is non-empty (blank and repeated ids dropped)
    2. Validate the target sets exactly one of status / selected
    3. Update every matching row in one statement
    4. Commit once; ids with no row are skipped

    Overlapping batches from different callers are last-write-wins per row.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        member_ids: Iterable[str],
        target: BatchTarget,
        timeout: Optional[float] = None,
    ) -> Result[BatchUpdateResult]:
        """
        Execute apply batch use case.

        Args:
            member_ids: IDs of members to update
            target: Status or selected flag to apply
            timeout: Seconds allowed for each store round trip

        Returns:
            Result[BatchUpdateResult] with updated_count and updated rows
        """
        ids = list(
            dict.fromkeys(
                str(member_id).strip()
                for member_id in (member_ids or [])
                if member_id is not None and str(member_id).strip()
            )
        )
        if not ids:
            return Return.err(Error("INVALID_ARGUMENT", "At least one member id is required"))

        values_result = self._values_for(target)
        if values_result.is_err():
            return values_result

        async with self.uow:
            try:
                rows = await bounded(
                    self.uow.members.update_many(ids, values_result.value), timeout
                )
                await bounded(self.uow.commit(), timeout)
            except StoreError as exc:
                return Return.err(Error("STORE_ERROR", str(exc)))

        return Return.ok(BatchUpdateResult(updated_count=len(rows), rows=rows))

    @staticmethod
    def _values_for(target: BatchTarget) -> Result[Dict[str, Any]]:
        if (target.status is None) == (target.selected is None):
            return Return.err(
                Error("INVALID_ARGUMENT", "Exactly one of status or selected must be given")
            )

        if target.selected is not None:
            return Return.ok({"invited_selected": target.selected})

        try:
            status = MemberStatus(target.status)
        except ValueError:
            return Return.err(
                Error(
                    "INVALID_ARGUMENT",
                    f"Invalid status: {target.status}. "
                    "Must be one of: pending, approved, rejected, deleted",
                )
            )
        return Return.ok({"status": status.value})
