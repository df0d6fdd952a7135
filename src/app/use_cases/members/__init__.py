"""Member administration use cases."""

from .apply_batch_use_case import ApplyBatchUseCase
from .dtos import (
    BatchTarget,
    BatchUpdateResult,
    MemberListFilter,
    MemberPage,
)
from .list_members_use_case import ListMembersUseCase
from .select_member_use_case import SelectMemberUseCase
from .update_member_status_use_case import UpdateMemberStatusUseCase

__all__ = [
    "ListMembersUseCase",
    "ApplyBatchUseCase",
    "UpdateMemberStatusUseCase",
    "SelectMemberUseCase",
    "MemberListFilter",
    "MemberPage",
    "BatchTarget",
    "BatchUpdateResult",
]
