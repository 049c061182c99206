"""Unit tests for ChecklistRepository."""

import pytest

from repository import ChecklistRepository, NotFound, StoreUnavailable, ValidationError
from test_utils.memory_store import InMemoryRecordStore


class TestChecklistRepository:
    @pytest.mark.asyncio
    async def test_create_starts_uncompleted(self, checklist: ChecklistRepository):
        item = await checklist.create("성진", "  여권 챙기기 ")

        assert item.id is not None
        assert item.title == "여권 챙기기"
        assert item.is_completed is False

    @pytest.mark.asyncio
    async def test_list_is_newest_first(self, checklist: ChecklistRepository):
        await checklist.create("성진", "first")
        await checklist.create("지열", "second")

        assert [item.title for item in await checklist.list()] == ["second", "first"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("person,title", [("성진", ""), ("성진", "   "), ("nobody", "여권")])
    async def test_invalid_input_makes_no_remote_call(
        self,
        checklist: ChecklistRepository,
        store: InMemoryRecordStore,
        person: str,
        title: str,
    ):
        with pytest.raises(ValidationError):
            await checklist.create(person, title)

        assert store.calls == []

    @pytest.mark.asyncio
    async def test_toggle_pair_restores_original_value(self, checklist: ChecklistRepository):
        """toggle(id, False) then toggle(id, True) should leave the item uncompleted."""
        item = await checklist.create("지열", "환전")

        toggled = await checklist.toggle_complete(item.id, False)
        assert toggled.is_completed is True

        restored = await checklist.toggle_complete(item.id, True)
        assert restored.is_completed is False

    @pytest.mark.asyncio
    async def test_toggle_uses_caller_value_even_if_stale(
        self, checklist: ChecklistRepository, store: InMemoryRecordStore
    ):
        """The new value comes from the caller's snapshot, not from the store."""
        item = await checklist.create("성동", "유심 구매")
        # Another session completes the item behind our back
        await store.update("checklist", item.id, {"is_completed": True})

        result = await checklist.toggle_complete(item.id, item.is_completed)

        assert result.is_completed is True

    @pytest.mark.asyncio
    async def test_update_title(self, checklist: ChecklistRepository, store: InMemoryRecordStore):
        item = await checklist.create("성진", "old")

        renamed = await checklist.update(item.id, "new")
        assert renamed.title == "new"

        store.calls.clear()
        with pytest.raises(ValidationError):
            await checklist.update(item.id, " ")
        assert store.calls == []

    @pytest.mark.asyncio
    async def test_toggle_missing_item_raises_not_found(self, checklist: ChecklistRepository):
        with pytest.raises(NotFound):
            await checklist.toggle_complete(42, False)

    @pytest.mark.asyncio
    async def test_remove_twice(self, checklist: ChecklistRepository):
        item = await checklist.create("성진", "우산")

        await checklist.remove(item.id)
        await checklist.remove(item.id)

        assert await checklist.list() == []

    @pytest.mark.asyncio
    async def test_store_failure(self, checklist: ChecklistRepository, store: InMemoryRecordStore):
        store.fail_on.add("delete")

        with pytest.raises(StoreUnavailable):
            await checklist.remove(1)

    def test_people_must_not_be_empty(self, store: InMemoryRecordStore):
        with pytest.raises(ValueError):
            ChecklistRepository(store, [])

    @pytest.mark.asyncio
    async def test_unreadable_row_is_a_store_failure(
        self, checklist: ChecklistRepository, store: InMemoryRecordStore
    ):
        store.rows("checklist")[1] = {
            "id": 1,
            "person": "성진",
            "title": None,
            "is_completed": False,
            "created_at": "2025-03-01T09:00:00+00:00",
        }

        with pytest.raises(StoreUnavailable):
            await checklist.list()
