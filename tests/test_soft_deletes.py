"""
tests.test_soft_deletes

Trash lifecycle: delete -> trashed lookup -> restore / permanent delete.
"""

from __future__ import annotations

import pytest

from repokit.errors import UnsupportedOperationError
from repokit.repositories.entity import EntityRepository
from tests.models import Tag


@pytest.mark.asyncio
async def test_delete_restore_roundtrip(employees) -> None:
    ann = await employees.create({"name": "Ann"})
    assert ann.id == 1
    assert await employees.find_by_id(1) is ann

    assert await employees.delete_by_id(1) is True
    assert await employees.find_by_id(1) is None
    assert await employees.exists_by_id(1) is False

    trashed = await employees.find_trashed_by_id(1)
    assert trashed is ann
    assert trashed.trashed is True
    assert trashed.deleted_at.tzinfo is None

    assert await employees.restore_by_id(1) is True
    assert await employees.find_by_id(1) is ann
    assert ann.deleted_at is None


@pytest.mark.asyncio
async def test_trashed_rows_are_hidden_from_default_queries(employees) -> None:
    await employees.save_all([{"name": "Ann", "code": "A"}, {"name": "Bob", "code": "B"}])
    await employees.delete_by_id(1)

    assert [e.name for e in await employees.all()] == ["Bob"]
    assert [e.name for e in await employees.find({"name": "Ann"})] == []
    assert await employees.count() == 1
    assert await employees.find_by_code("A") is None
    assert await employees.find_all_by_id([1, 2]) == [await employees.find_by_id(2)]
    assert await employees.update(1, {"name": "Ann B."}) is False

    assert [e.name for e in await employees.all_trashed()] == ["Ann"]


@pytest.mark.asyncio
async def test_delete_twice_reports_absent(employees) -> None:
    await employees.create({"name": "Ann"})

    assert await employees.delete_by_id(1) is True
    assert await employees.delete_by_id(1) is False
    assert await employees.delete_by_id(2) is False


@pytest.mark.asyncio
async def test_permanent_delete(employees) -> None:
    await employees.create({"name": "Ann"})
    await employees.delete_by_id(1)

    assert await employees.permanently_delete_by_id(1) is True
    assert await employees.find_by_id(1) is None
    assert await employees.find_trashed_by_id(1) is None
    assert await employees.all_trashed() == []
    assert await employees.permanently_delete_by_id(1) is False


@pytest.mark.asyncio
async def test_missing_ids(employees) -> None:
    assert await employees.find_trashed_by_id(7) is None
    assert await employees.restore_by_id(7) is False
    assert await employees.permanently_delete_by_id(7) is False


@pytest.mark.asyncio
async def test_trashed_operations_need_soft_delete_column(session, settings) -> None:
    tags = EntityRepository(session, model=Tag, settings=settings)

    with pytest.raises(UnsupportedOperationError):
        await tags.all_trashed()
    with pytest.raises(UnsupportedOperationError):
        await tags.find_trashed_by_id(1)
    with pytest.raises(UnsupportedOperationError):
        await tags.restore_by_id(1)
