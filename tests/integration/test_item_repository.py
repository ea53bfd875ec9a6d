"""Integration tests for ItemRepository on SQLite."""

import pytest

from stockroom.core.enums import ErrorCode
from stockroom.core.result import Failure, Success
from stockroom.domain.entities import ItemQuery, ItemStatus
from stockroom.infrastructure.persistence.repositories import ItemRepository


async def _create(repo: ItemRepository, **data):
    result = await repo.create(data)
    assert isinstance(result, Success)
    return result.value


@pytest.mark.integration
class TestItemCrud:
    """Test create, read, update and soft delete."""

    async def test_create_and_find(self, session, add_space):
        space = await add_space("Warehouse")
        repo = ItemRepository(session)

        created = await _create(
            repo, name="Widget", sku="W-1", cost="9.99", price="12.50", space_id=space
        )
        found = await repo.find_by_id(created.id)

        assert isinstance(found, Success)
        item = found.value
        assert item.name == "Widget"
        assert item.cost == "9.99"
        assert item.price == "12.5"
        assert item.status is ItemStatus.ACTIVE
        assert item.space_id == space

    async def test_unknown_fields_ignored(self, session):
        repo = ItemRepository(session)

        created = await _create(repo, name="Widget", id=999, deleted_at="never")

        assert created.id != 999
        assert created.audit.deleted_at is None

    async def test_find_missing_returns_none(self, session):
        result = await ItemRepository(session).find_by_id(12345)

        assert result == Success(value=None)

    async def test_update_applies_changes(self, session):
        repo = ItemRepository(session)
        created = await _create(repo, name="Widget", cost="1")

        result = await repo.update(
            created.id, {"name": "Gadget", "cost": "2.75", "status": ItemStatus.INACTIVE}
        )

        assert isinstance(result, Success)
        assert result.value.name == "Gadget"
        assert result.value.cost == "2.75"
        assert result.value.status is ItemStatus.INACTIVE

    async def test_update_missing_item(self, session):
        result = await ItemRepository(session).update(404, {"name": "Gadget"})

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.NOT_FOUND
        assert result.error.message == "Item with id '404' not found"

    async def test_delete_is_soft(self, session):
        repo = ItemRepository(session)
        created = await _create(repo, name="Widget")

        deleted = await repo.delete(created.id)
        found = await repo.find_by_id(created.id)
        again = await repo.delete(created.id)

        assert deleted == Success(value=None)
        assert found == Success(value=None)
        assert isinstance(again, Failure)
        assert again.error.code == ErrorCode.NOT_FOUND


@pytest.mark.integration
class TestItemListing:
    """Test find_all filters, ordering and paging."""

    async def test_filters_by_space_and_status(self, session, add_space):
        space = await add_space("A")
        other = await add_space("B")
        repo = ItemRepository(session)
        await _create(repo, name="Bolt", space_id=space)
        await _create(repo, name="Nut", space_id=space, status="inactive")
        await _create(repo, name="Screw", space_id=other)

        result = await repo.find_all(ItemQuery(space_id=space))

        assert isinstance(result, Success)
        assert [item.name for item in result.value] == ["Bolt"]

    async def test_search_matches_name_code_or_sku(self, session, add_space):
        space = await add_space("A")
        repo = ItemRepository(session)
        await _create(repo, name="Hex Bolt", space_id=space)
        await _create(repo, name="Nut", code="BOLT-NUT", space_id=space)
        await _create(repo, name="Washer", sku="W-9", space_id=space)

        result = await repo.find_all(ItemQuery(space_id=space, search="bolt"))

        assert isinstance(result, Success)
        assert sorted(item.name for item in result.value) == ["Hex Bolt", "Nut"]

    async def test_sort_and_paginate(self, session, add_space):
        space = await add_space("A")
        repo = ItemRepository(session)
        for name in ["Charlie", "Alpha", "Echo", "Bravo", "Delta"]:
            await _create(repo, name=name, space_id=space)

        first_page = await repo.find_all(
            ItemQuery(space_id=space, sort_by="name", sort_order="desc", limit=2)
        )
        second_page = await repo.find_all(
            ItemQuery(space_id=space, sort_by="name", sort_order="desc", limit=2, page=2)
        )

        assert [i.name for i in first_page.value] == ["Echo", "Delta"]
        assert [i.name for i in second_page.value] == ["Charlie", "Bravo"]

    async def test_deleted_items_not_listed(self, session, add_space):
        space = await add_space("A")
        repo = ItemRepository(session)
        kept = await _create(repo, name="Kept", space_id=space)
        gone = await _create(repo, name="Gone", space_id=space)
        await repo.delete(gone.id)

        result = await repo.find_all(ItemQuery(space_id=space))

        assert [item.id for item in result.value] == [kept.id]

    @pytest.mark.parametrize(
        ("search", "expected"),
        [
            ("100%", ["100% Cotton"]),
            ("a_b", ["Part a_b"]),
            ("\\", ["Back\\slash"]),
        ],
    )
    async def test_search_wildcards_match_literally(
        self, session, add_space, search, expected
    ):
        space = await add_space("A")
        repo = ItemRepository(session)
        for name in ["100% Cotton", "1000 Cotton", "Part a_b", "Part axb", "Back\\slash"]:
            await _create(repo, name=name, space_id=space)

        result = await repo.find_all(ItemQuery(space_id=space, search=search))

        assert isinstance(result, Success)
        assert [item.name for item in result.value] == expected
