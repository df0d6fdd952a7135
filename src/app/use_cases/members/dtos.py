"""
Member Admin Use Case DTOs (Data Transfer Objects)

Commands and results for member administration.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from pydantic import BaseModel
from pydantic import Field as PydanticField

from src.domain.entities import Member

MIN_PER_PAGE = 10
MAX_PER_PAGE = 200
DEFAULT_PER_PAGE = 50

MEMBER_SORT_FIELDS = (
    "created_at",
    "id",
    "full_name",
    "email",
    "whatsapp",
    "country",
    "city",
    "status",
    "invite_code",
    "invite_code_self",
    "invited_selected",
)

# Admin shorthand accepted by the single member update path
ACTION_STATUSES = {
    "approve": "approved",
    "reject": "rejected",
    "delete": "deleted",
}


def clamp_per_page(per_page: int) -> int:
    return max(MIN_PER_PAGE, min(MAX_PER_PAGE, per_page))


# ============================================================================
# Command DTOs
# ============================================================================


class MemberListFilter(BaseModel):
    """Filter, sort and paging options for the admin member listing"""

    search_text: Optional[str] = None
    status_filter: List[str] = PydanticField(default_factory=list)
    page: int = 1
    per_page: int = DEFAULT_PER_PAGE
    sort_field: str = "created_at"
    sort_direction: str = "desc"


class BatchTarget(BaseModel):
    """Value applied by a batch update; exactly one field must be set"""

    status: Optional[str] = None
    selected: Optional[bool] = None


# ============================================================================
# Result DTOs
# ============================================================================


@dataclass
class MemberPage:
    """One page of the admin member listing"""

    rows: List[Member]
    total_count: int
    page: int
    per_page: int


@dataclass
class BatchUpdateResult:
    """Rows touched by a batch update"""

    updated_count: int
    rows: List[Member] = field(default_factory=list)
