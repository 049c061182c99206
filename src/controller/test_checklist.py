"""Unit tests for ChecklistController."""

import pytest

from controller import ChecklistController
from test_utils.memory_store import InMemoryRecordStore


class TestChecklistController:
    def test_first_person_is_selected_by_default(self, checklist_controller: ChecklistController):
        assert checklist_controller.state.selected_person == "성진"

    @pytest.mark.asyncio
    async def test_create_for_selected_person(self, checklist_controller: ChecklistController):
        checklist_controller.select_person("지열")

        assert await checklist_controller.create("JR 패스") is True

        [item] = checklist_controller.filtered_items()
        assert item.person == "지열"
        assert item.title == "JR 패스"

    @pytest.mark.asyncio
    async def test_filter_by_person(self, checklist_controller: ChecklistController):
        await checklist_controller.create("여권")
        checklist_controller.select_person("성동")
        await checklist_controller.create("충전기")

        assert [i.title for i in checklist_controller.filtered_items()] == ["충전기"]
        checklist_controller.select_person("성진")
        assert [i.title for i in checklist_controller.filtered_items()] == ["여권"]

    def test_unknown_person_cannot_be_selected(self, checklist_controller: ChecklistController):
        with pytest.raises(ValueError):
            checklist_controller.select_person("nobody")

    @pytest.mark.asyncio
    async def test_blank_title_is_reported(
        self, checklist_controller: ChecklistController, store: InMemoryRecordStore
    ):
        assert await checklist_controller.create("   ") is False

        assert store.calls == []
        assert checklist_controller.drain_notices()[0].level == "error"

    @pytest.mark.asyncio
    async def test_toggle_twice_restores_value(self, checklist_controller: ChecklistController):
        await checklist_controller.create("엔화 환전")
        [item] = checklist_controller.filtered_items()

        assert await checklist_controller.toggle_complete(item) is True
        [item] = checklist_controller.filtered_items()
        assert item.is_completed is True

        assert await checklist_controller.toggle_complete(item) is True
        [item] = checklist_controller.filtered_items()
        assert item.is_completed is False

    @pytest.mark.asyncio
    async def test_progress_per_person(self, checklist_controller: ChecklistController):
        await checklist_controller.create("a")
        await checklist_controller.create("b")
        item = checklist_controller.filtered_items()[0]
        await checklist_controller.toggle_complete(item)

        progress = {p.person: (p.completed, p.total) for p in checklist_controller.progress()}

        assert progress == {"성진": (1, 2), "지열": (0, 0), "성동": (0, 0)}

    @pytest.mark.asyncio
    async def test_rename(self, checklist_controller: ChecklistController):
        await checklist_controller.create("old")
        [item] = checklist_controller.filtered_items()

        assert await checklist_controller.rename(item.id, "new") is True
        assert checklist_controller.find(item.id).title == "new"

    @pytest.mark.asyncio
    async def test_remove_requires_confirmation(
        self, checklist_controller: ChecklistController, store: InMemoryRecordStore
    ):
        await checklist_controller.create("우산")
        [item] = checklist_controller.filtered_items()

        assert await checklist_controller.remove(item.id, confirmed=False) is False
        assert store.count("delete") == 0

        assert await checklist_controller.remove(item.id, confirmed=True) is True
        assert checklist_controller.filtered_items() == []

    @pytest.mark.asyncio
    async def test_failed_toggle_keeps_snapshot(
        self, checklist_controller: ChecklistController, store: InMemoryRecordStore
    ):
        await checklist_controller.create("우산")
        [item] = checklist_controller.filtered_items()
        store.fail_on.add("update")

        assert await checklist_controller.toggle_complete(item) is False

        assert checklist_controller.find(item.id).is_completed is False
        assert checklist_controller.state.is_busy is False
        assert checklist_controller.drain_notices()[-1].level == "error"
