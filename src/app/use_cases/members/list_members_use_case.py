"""
List Members Use Case

Admin listing of members with search, status filter, sorting and paging.
"""

from typing import Optional

from libs.result import Error, Result, Return
from src.app.repositories.errors import StoreError
from src.app.services.store_call import bounded
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import SortDirection

from .dtos import MEMBER_SORT_FIELDS, MemberListFilter, MemberPage, clamp_per_page


class ListMembersUseCase:
    """
    Use case for the admin member listing.

    Business Rules:
    - search_text matches name, email, phone or own invite code, case-insensitively
    - status_filter values are OR-combined; empty matches every status
    - search and status filters apply together
    - per_page is clamped to [10, 200], never rejected
    - page is 1-based
    - total_count ignores paging
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, filters: MemberListFilter, timeout: Optional[float] = None
    ) -> Result[MemberPage]:
        if filters.page < 1:
            return Return.err(Error("INVALID_ARGUMENT", "page must be 1 or greater"))

        if filters.sort_field not in MEMBER_SORT_FIELDS:
            return Return.err(
                Error(
                    "INVALID_ARGUMENT",
                    f"Cannot sort by {filters.sort_field}. "
                    f"Must be one of: {', '.join(MEMBER_SORT_FIELDS)}",
                )
            )

        try:
            direction = SortDirection(filters.sort_direction)
        except ValueError:
            return Return.err(
                Error(
                    "INVALID_ARGUMENT",
                    f"Invalid sort direction: {filters.sort_direction}. Must be one of: asc, desc",
                )
            )

        per_page = clamp_per_page(filters.per_page)
        search_text = (filters.search_text or "").strip() or None
        statuses = list(dict.fromkeys(s for s in filters.status_filter if s))

        async with self.uow:
            try:
                rows, total_count = await bounded(
                    self.uow.members.search(
                        search_text=search_text,
                        statuses=statuses,
                        sort_field=filters.sort_field,
                        sort_direction=direction,
                        offset=(filters.page - 1) * per_page,
                        limit=per_page,
                    ),
                    timeout,
                )
            except StoreError as exc:
                return Return.err(Error("STORE_ERROR", str(exc)))

        return Return.ok(
            MemberPage(
                rows=rows,
                total_count=total_count,
                page=filters.page,
                per_page=per_page,
            )
        )
