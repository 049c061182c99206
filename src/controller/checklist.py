"""View state controller for the per-person checklist."""

import logging
from typing import List, Optional

from models import ChecklistItem
from repository import ChecklistRepository, StoreUnavailable, ValidationError
from views import PersonProgress, completion_by_person, items_for_person
from .base_controller import BaseController
from .state import ChecklistState

logger = logging.getLogger(__name__)


class ChecklistController(BaseController):
    """Owns the checklist snapshot and the selected person."""

    def __init__(
        self,
        repository: ChecklistRepository,
        state: Optional[ChecklistState] = None,
    ):
        self.repository = repository
        self.state = state or ChecklistState(selected_person=repository.people[0])

    @property
    def people(self) -> List[str]:
        return self.repository.people

    async def refresh(self) -> bool:
        """Reload all items. Refused while a change is in flight."""
        if self.reject_if_busy("refresh checklist"):
            return False
        with self.busy():
            return await self._reload()

    async def _reload(self) -> bool:
        try:
            self.state.items = await self.repository.list()
        except StoreUnavailable as e:
            logger.error(f"Error fetching checklists: {e}")
            self.notify("❌ 체크리스트를 불러오지 못했습니다.", "error")
            return False
        return True

    def filtered_items(self) -> List[ChecklistItem]:
        return items_for_person(self.state.items, self.state.selected_person)

    def progress(self) -> List[PersonProgress]:
        return completion_by_person(self.state.items, self.people)

    def find(self, item_id: int) -> Optional[ChecklistItem]:
        for item in self.state.items:
            if item.id == item_id:
                return item
        return None

    def select_person(self, person: str) -> None:
        if person not in self.people:
            raise ValueError(f"Unknown person: {person}")
        self.state.selected_person = person

    async def create(self, title: str) -> bool:
        """Add an item for the selected person."""
        if self.reject_if_busy("create checklist item"):
            return False

        with self.busy():
            try:
                await self.repository.create(self.state.selected_person, title)
            except ValidationError:
                self.notify("⚠️ 항목 내용을 입력해주세요.", "error")
                return False
            except StoreUnavailable as e:
                logger.error(f"Error creating checklist item: {e}")
                self.notify("❌ 항목을 추가하지 못했습니다.", "error")
                return False

            await self._reload()
            return True

    async def rename(self, item_id: int, title: str) -> bool:
        if self.reject_if_busy("rename checklist item"):
            return False

        with self.busy():
            try:
                await self.repository.update(item_id, title)
            except ValidationError:
                self.notify("⚠️ 항목 내용을 입력해주세요.", "error")
                return False
            except StoreUnavailable as e:
                logger.error(f"Error renaming checklist item {item_id}: {e}")
                self.notify("❌ 항목을 변경하지 못했습니다.", "error")
                return False

            await self._reload()
            return True

    async def toggle_complete(self, item: ChecklistItem) -> bool:
        """
        Flip an item's completion flag.

        Uses the flag from the local snapshot; if another session changed
        the item since the last refresh, the written value is wrong.
        """
        if self.reject_if_busy("toggle checklist item"):
            return False

        with self.busy():
            try:
                await self.repository.toggle_complete(item.id, item.is_completed)
            except StoreUnavailable as e:
                logger.error(f"Error updating checklist item {item.id}: {e}")
                self.notify("❌ 항목을 변경하지 못했습니다.", "error")
                return False

            await self._reload()
            return True

    async def remove(self, item_id: int, confirmed: bool) -> bool:
        if not confirmed:
            return False
        if self.reject_if_busy("delete checklist item"):
            return False

        with self.busy():
            try:
                await self.repository.remove(item_id)
            except StoreUnavailable as e:
                logger.error(f"Error deleting checklist item {item_id}: {e}")
                self.notify("❌ 항목을 삭제하지 못했습니다.", "error")
                return False

            await self._reload()
            return True
