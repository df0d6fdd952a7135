"""
Unit tests for Apply Batch Use Case
"""

import pytest
from unittest.mock import AsyncMock

from src.app.repositories.errors import StoreError
from src.app.use_cases.members import ApplyBatchUseCase, BatchTarget
from tests.fixtures.fake_store import FakeUnitOfWork


@pytest.mark.asyncio
async def test_batch_status_update(make_member):
    # Arrange
    uow = FakeUnitOfWork(
        [
            make_member("a", minute=1, status="pending"),
            make_member("b", minute=2, status="pending"),
            make_member("c", minute=3, status="pending"),
        ]
    )

    # Act
    result = await ApplyBatchUseCase(uow).execute(["a", "b"], BatchTarget(status="approved"))

    # Assert
    assert result.is_ok()
    assert result.value.updated_count == 2
    assert {m.id for m in result.value.rows} == {"a", "b"}
    assert uow.members.rows["a"].status == "approved"
    assert uow.members.rows["c"].status == "pending"
    assert uow.commits == 1


@pytest.mark.asyncio
async def test_batch_selected_flag(make_member):
    uow = FakeUnitOfWork([make_member("a", status="rejected")])

    result = await ApplyBatchUseCase(uow).execute(["a"], BatchTarget(selected=True))

    assert result.value.updated_count == 1
    assert uow.members.rows["a"].invited_selected is True
    assert uow.members.rows["a"].status == "rejected"


@pytest.mark.asyncio
async def test_unknown_ids_are_skipped(make_member):
    uow = FakeUnitOfWork([make_member("a")])

    result = await ApplyBatchUseCase(uow).execute(["ghost"], BatchTarget(status="deleted"))

    assert result.is_ok()
    assert result.value.updated_count == 0
    assert result.value.rows == []


@pytest.mark.asyncio
async def test_repeated_ids_counted_once(mock_uow, make_member):
    mock_uow.members.update_many = AsyncMock(return_value=[make_member("a")])

    result = await ApplyBatchUseCase(mock_uow).execute(
        ["a", " a ", "a", ""], BatchTarget(status="approved")
    )

    assert result.value.updated_count == 1
    mock_uow.members.update_many.assert_called_once_with(["a"], {"status": "approved"})
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
@pytest.mark.parametrize("ids", [[], ["", "  "], None])
async def test_empty_ids_invalid(mock_uow, ids):
    result = await ApplyBatchUseCase(mock_uow).execute(ids, BatchTarget(status="approved"))

    assert result.is_err()
    assert result.error.code == "INVALID_ARGUMENT"
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "target",
    [BatchTarget(), BatchTarget(status="approved", selected=True), BatchTarget(status="banned")],
)
async def test_invalid_target(mock_uow, target):
    result = await ApplyBatchUseCase(mock_uow).execute(["a"], target)

    assert result.is_err()
    assert result.error.code == "INVALID_ARGUMENT"


@pytest.mark.asyncio
async def test_store_failure_is_not_committed(make_member):
    uow = FakeUnitOfWork([make_member("a")])
    uow.members.fail_on = "update_many"

    result = await ApplyBatchUseCase(uow).execute(["a"], BatchTarget(status="approved"))

    assert result.is_err()
    assert result.error.code == "STORE_ERROR"
    assert uow.commits == 0
    assert uow.rollbacks == 1


@pytest.mark.asyncio
async def test_commit_failure(mock_uow, make_member):
    mock_uow.members.update_many = AsyncMock(return_value=[make_member("a")])
    mock_uow.commit = AsyncMock(side_effect=StoreError("deadlock detected"))

    result = await ApplyBatchUseCase(mock_uow).execute(["a"], BatchTarget(status="approved"))

    assert result.is_err()
    assert result.error.code == "STORE_ERROR"
