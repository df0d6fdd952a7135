"""
Integration tests for the SQLAlchemy member store and unit of work
Runs use cases and repository queries directly against SQLite.
"""

from datetime import datetime

import pytest

from src.adapter.repositories.member_repository import MemberRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.members import ListMembersUseCase
from src.app.use_cases.members.dtos import MemberListFilter
from src.app.use_cases.referrals import ResolveReferralsUseCase
from src.domain.entities import Member, SortDirection


@pytest.mark.asyncio
async def test_resolved_rows_readable_after_unit_of_work(db_session, seeded_members):
    """Rows returned by a use case stay loaded once the unit of work has closed"""
    result = await ResolveReferralsUseCase(SqlAlchemyUnitOfWork(db_session)).execute("m-root")

    assert result.is_ok()
    tree = result.value
    assert tree.member.as_row()["invite_code_self"] == "X1"
    assert [row.as_row()["id"] for row in tree.level1] == ["m-b2", "m-b1"]
    assert [row.id for row in tree.level2] == ["m-c1"]


@pytest.mark.asyncio
async def test_listed_rows_readable_after_unit_of_work(db_session, seeded_members):
    use_case = ListMembersUseCase(SqlAlchemyUnitOfWork(db_session))

    result = await use_case.execute(MemberListFilter(search_text="bassel"))

    assert result.is_ok()
    assert [row.as_row()["email"] for row in result.value.rows] == ["bassel@example.com"]


@pytest.mark.asyncio
async def test_search_matches_legacy_own_code(db_session, seeded_members):
    repository = MemberRepository(db_session)

    rows, total = await repository.search("leg1", [], "created_at", SortDirection.desc, 0, 50)

    assert total == 1
    assert [row.id for row in rows] == ["m-legacy"]


@pytest.mark.asyncio
async def test_used_code_match_ignores_case_and_padding(db_session, seeded_members):
    db_session.add(
        Member(
            id="m-pad",
            full_name="Padded Code",
            invite_code=" x1 ",
            status="approved",
            created_at=datetime(2024, 1, 7, 10, 0, 0),
        )
    )
    await db_session.commit()
    repository = MemberRepository(db_session)

    direct = await repository.list_by_used_code("X1")
    indirect = await repository.list_by_used_codes(["x1", "y1"])

    assert [row.id for row in direct] == ["m-pad", "m-b2", "m-b1"]
    assert [row.id for row in indirect] == ["m-pad", "m-c1", "m-b2", "m-b1"]
