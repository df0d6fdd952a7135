import functools
import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from sqlalchemy import func, or_, update
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.errors import StoreError
from src.app.repositories.member_repository import IMemberRepository
from src.domain.entities import Member, SortDirection
from src.domain.invite_code import OWN_INVITE_CODE_ALIASES

logger = logging.getLogger(__name__)

SEARCHABLE_COLUMNS = ("full_name", "email", "whatsapp", "invite_code_self")

# Own code aliases that only live in the extra JSON attributes
EXTRA_CODE_ALIASES = tuple(a for a in OWN_INVITE_CODE_ALIASES if a not in SEARCHABLE_COLUMNS)


def _escape_like(text: str) -> str:
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _used_code():
    return func.lower(func.trim(col(Member.invite_code)))


def translate_store_errors(method):
    """Re-raise driver failures as StoreError."""

    @functools.wraps(method)
    async def wrapper(self, *args, **kwargs):
        try:
            return await method(self, *args, **kwargs)
        except SQLAlchemyError as exc:
            logger.error(f"Member store failure in {method.__name__}: {exc}")
            raise StoreError(str(exc)) from exc

    return wrapper


class MemberRepository(IMemberRepository):
    """Member repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    @translate_store_errors
    async def get_by_id(self, member_id: str) -> Optional[Member]:
        """Get member by ID"""
        stmt = select(Member).where(Member.id == member_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    @translate_store_errors
    async def create(self, member: Member) -> Member:
        """Create a new member"""
        self.session.add(member)
        await self.session.flush()
        await self.session.refresh(member)
        return member

    @translate_store_errors
    async def update(self, member: Member) -> Member:
        """Update existing member"""
        self.session.add(member)
        await self.session.flush()
        await self.session.refresh(member)
        return member

    @translate_store_errors
    async def list_by_used_code(
        self, code: str, statuses: Optional[Sequence[str]] = None
    ) -> List[Member]:
        """Get members who registered with the given invite code, ignoring case and padding"""
        stmt = select(Member).where(_used_code() == code.strip().lower())
        return await self._referral_rows(stmt, statuses)

    @translate_store_errors
    async def list_by_used_codes(
        self, codes: Sequence[str], statuses: Optional[Sequence[str]] = None
    ) -> List[Member]:
        """Get members who registered with any of the given invite codes"""
        if not codes:
            return []
        wanted = list(dict.fromkeys(code.strip().lower() for code in codes))
        stmt = select(Member).where(_used_code().in_(wanted))
        return await self._referral_rows(stmt, statuses)

    async def _referral_rows(self, stmt, statuses: Optional[Sequence[str]]) -> List[Member]:
        if statuses:
            stmt = stmt.where(col(Member.status).in_(list(statuses)))
        # Newest referral first, id breaks created_at ties
        stmt = stmt.order_by(col(Member.created_at).desc(), col(Member.id).asc())
        result = await self.session.exec(stmt)
        return list(result.all())

    @translate_store_errors
    async def search(
        self,
        search_text: Optional[str],
        statuses: Sequence[str],
        sort_field: str,
        sort_direction: SortDirection,
        offset: int,
        limit: int,
    ) -> Tuple[List[Member], int]:
        """
        Filtered, sorted, paged member listing.

        search_text matches case-insensitively against any searchable column
        or a legacy own code alias kept in extra;
        statuses are OR-combined; both filters apply together.
        """
        conditions = []
        if search_text:
            pattern = f"%{_escape_like(search_text)}%"
            conditions.append(
                or_(
                    *[
                        col(getattr(Member, column)).ilike(pattern, escape="\\")
                        for column in SEARCHABLE_COLUMNS
                    ],
                    *[
                        col(Member.extra)[alias].as_string().ilike(pattern, escape="\\")
                        for alias in EXTRA_CODE_ALIASES
                    ],
                )
            )
        if statuses:
            conditions.append(col(Member.status).in_(list(statuses)))

        count_stmt = select(func.count()).select_from(Member).where(*conditions)
        count_result = await self.session.exec(count_stmt)
        total_count = count_result.one()

        sort_column = col(getattr(Member, sort_field))
        order = sort_column.asc() if sort_direction == SortDirection.asc else sort_column.desc()
        stmt = (
            select(Member)
            .where(*conditions)
            .order_by(order, col(Member.id).asc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all()), total_count

    @translate_store_errors
    async def update_many(self, member_ids: Sequence[str], values: Dict[str, Any]) -> List[Member]:
        """Apply the same column values to every member in member_ids"""
        ids = list(member_ids)
        stmt = (
            update(Member)
            .where(col(Member.id).in_(ids))
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        await self.session.execute(stmt)
        await self.session.flush()

        # Re-read so callers see the stored values, not stale identity-map copies
        select_stmt = (
            select(Member)
            .where(col(Member.id).in_(ids))
            .order_by(col(Member.created_at).desc(), col(Member.id).asc())
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(select_stmt)
        return list(result.all())
