from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence, Tuple

from src.domain.entities import Member, SortDirection


class IMemberRepository(ABC):
    """Member repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, member_id: str) -> Optional[Member]:
        """Get member by ID"""
        pass

    @abstractmethod
    async def create(self, member: Member) -> Member:
        """Create a new member"""
        pass

    @abstractmethod
    async def update(self, member: Member) -> Member:
        """Update existing member"""
        pass

    @abstractmethod
    async def list_by_used_code(
        self, code: str, statuses: Optional[Sequence[str]] = None
    ) -> List[Member]:
        """
        Get members who registered with the given invite code.

        Ordered by created_at DESC, then id ASC.
        """
        pass

    @abstractmethod
    async def list_by_used_codes(
        self, codes: Sequence[str], statuses: Optional[Sequence[str]] = None
    ) -> List[Member]:
        """
        Get members who registered with any of the given invite codes.

        Ordered by created_at DESC, then id ASC.
        """
        pass

    @abstractmethod
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

        Returns:
            Tuple of (page rows, total matching rows ignoring paging)
        """
        pass

    @abstractmethod
    async def update_many(self, member_ids: Sequence[str], values: Dict[str, Any]) -> List[Member]:
        """
        Apply the same column values to every member in member_ids.

        Unknown ids are skipped. Returns the updated members.
        """
        pass
