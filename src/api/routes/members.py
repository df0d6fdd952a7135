"""
Admin Member API Routes

Member listing, batch updates and single member updates for admin tooling.
Authentication is via Admin API Key.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel

from src.api.error import raise_for_error
from src.api.utils.admin_auth import verify_admin_api_key
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.members import (
    ApplyBatchUseCase,
    BatchTarget,
    ListMembersUseCase,
    MemberListFilter,
    SelectMemberUseCase,
    UpdateMemberStatusUseCase,
)
from src.app.use_cases.members.dtos import DEFAULT_PER_PAGE
from src.depends import get_store_timeout, get_unit_of_work

router = APIRouter(
    prefix="/admin/members",
    tags=["Admin Members"],
    dependencies=[Depends(verify_admin_api_key)],
)


class MemberListResponse(BaseModel):
    """GET /admin/members response payload"""

    rows: List[Dict[str, Any]]
    total_count: int
    page: int
    per_page: int


class BatchUpdateRequest(BaseModel):
    """POST /admin/members/batch-update request payload"""

    ids: List[str]
    status: Optional[str] = None
    selected: Optional[bool] = None


class BatchUpdateResponse(BaseModel):
    """POST /admin/members/batch-update response payload"""

    updated_count: int
    rows: List[Dict[str, Any]]


class MemberActionRequest(BaseModel):
    """POST /admin/members/{member_id} request payload"""

    action: str


class SelectMemberRequest(BaseModel):
    """POST /admin/members/{member_id}/select request payload"""

    selected: bool = False


class MemberUpdateResponse(BaseModel):
    """Single member update response payload"""

    ok: bool
    member: Dict[str, Any]


@router.get("", status_code=status.HTTP_200_OK, response_model=MemberListResponse)
async def list_members(
    search: Optional[str] = Query(None, description="Name, email, phone or invite code"),
    status_filter: List[str] = Query([], alias="status", description="Status values to include"),
    page: int = Query(1, description="1-based page number"),
    per_page: int = Query(DEFAULT_PER_PAGE, description="Rows per page, clamped to 10-200"),
    sort_field: str = Query("created_at"),
    sort_direction: str = Query("desc"),
    uow: UnitOfWork = Depends(get_unit_of_work),
    timeout: float = Depends(get_store_timeout),
):
    """
    List Members

    Requires: X-Admin-API-Key header

    Raises:
        - 400 Bad Request: INVALID_ARGUMENT (page, sort field or direction)
        - 401 Unauthorized: Missing or invalid admin API key
        - 500 Internal Server Error: STORE_ERROR
    """
    # Accept both ?status=a&status=b and ?status=a,b
    statuses = [part.strip() for value in status_filter for part in value.split(",")]

    filters = MemberListFilter(
        search_text=search,
        status_filter=[s for s in statuses if s],
        page=page,
        per_page=per_page,
        sort_field=sort_field,
        sort_direction=sort_direction,
    )
    result = await ListMembersUseCase(uow).execute(filters, timeout=timeout)

    if result.is_err():
        raise_for_error(result.error)

    member_page = result.value
    return MemberListResponse(
        rows=[row.as_row() for row in member_page.rows],
        total_count=member_page.total_count,
        page=member_page.page,
        per_page=member_page.per_page,
    )


@router.post(
    "/batch-update",
    status_code=status.HTTP_200_OK,
    response_model=BatchUpdateResponse,
)
async def batch_update_members(
    request: BatchUpdateRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    timeout: float = Depends(get_store_timeout),
):
    """
    Batch Update Members

    Applies one status or selected flag to every listed member.
    Unknown ids are skipped.

    Requires: X-Admin-API-Key header

    Raises:
        - 400 Bad Request: INVALID_ARGUMENT (empty ids, bad target)
        - 401 Unauthorized: Missing or invalid admin API key
        - 500 Internal Server Error: STORE_ERROR
    """
    target = BatchTarget(status=request.status, selected=request.selected)
    result = await ApplyBatchUseCase(uow).execute(request.ids, target, timeout=timeout)

    if result.is_err():
        raise_for_error(result.error)

    batch = result.value
    return BatchUpdateResponse(
        updated_count=batch.updated_count,
        rows=[row.as_row() for row in batch.rows],
    )


@router.post(
    "/{member_id}",
    status_code=status.HTTP_200_OK,
    response_model=MemberUpdateResponse,
)
async def update_member_status(
    member_id: str,
    request: MemberActionRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    timeout: float = Depends(get_store_timeout),
):
    """
    Update Member Status

    action: approve, reject, delete, or a raw status value.

    Requires: X-Admin-API-Key header

    Raises:
        - 400 Bad Request: INVALID_ARGUMENT
        - 404 Not Found: NOT_FOUND
        - 500 Internal Server Error: STORE_ERROR
    """
    result = await UpdateMemberStatusUseCase(uow).execute(
        member_id, request.action, timeout=timeout
    )

    if result.is_err():
        raise_for_error(result.error)

    return MemberUpdateResponse(ok=True, member=result.value.as_row())


@router.post(
    "/{member_id}/select",
    status_code=status.HTTP_200_OK,
    response_model=MemberUpdateResponse,
)
async def select_member(
    member_id: str,
    request: SelectMemberRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    timeout: float = Depends(get_store_timeout),
):
    """
    Select Member

    Sets the selected flag used to pick members for a follow-up action.

    Requires: X-Admin-API-Key header

    Raises:
        - 404 Not Found: NOT_FOUND
        - 500 Internal Server Error: STORE_ERROR
    """
    result = await SelectMemberUseCase(uow).execute(
        member_id, request.selected, timeout=timeout
    )

    if result.is_err():
        raise_for_error(result.error)

    return MemberUpdateResponse(ok=True, member=result.value.as_row())
