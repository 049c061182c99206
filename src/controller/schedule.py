"""View state controller for the itinerary timeline, calendar and map."""

import logging
from typing import Dict, List, Optional

from models import ScheduleEntry, ScheduleFields
from repository import ItineraryRepository, StoreUnavailable, ValidationError
from views import (
    DaySchedule,
    MapMarker,
    build_markers,
    category_counts_by_day,
    entries_for_day,
    group_by_day,
)
from .base_controller import BaseController
from .state import ViewMode, ViewState

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("day", "time", "title", "description", "category", "location")


class ScheduleController(BaseController):
    """
    Owns the itinerary snapshot and applies user intents to it.

    Every successful change is followed by a full re-fetch; the snapshot is
    never patched locally. Repository failures are handled here and turned
    into notices.
    """

    def __init__(
        self,
        repository: ItineraryRepository,
        state: Optional[ViewState] = None,
        trip_days: int = 4,
    ):
        self.repository = repository
        self.state = state or ViewState()
        self.trip_days = trip_days

    async def refresh(self) -> bool:
        """
        Reload all entries. On failure the previous snapshot is kept.

        Refused while a change is in flight, so a slow reload cannot
        overwrite the snapshot taken after that change.
        """
        if self.reject_if_busy("refresh"):
            return False
        with self.busy():
            return await self._reload()

    async def _reload(self) -> bool:
        try:
            self.state.entries = await self.repository.list()
        except StoreUnavailable as e:
            logger.error(f"Failed to load schedule: {e}")
            self.notify("❌ 일정을 불러오지 못했습니다.", "error")
            return False
        return True

    # Derived views

    def filtered_entries(self) -> List[ScheduleEntry]:
        return entries_for_day(self.state.entries, self.state.selected_day)

    def available_days(self) -> List[int]:
        days = set(range(1, self.trip_days + 1))
        days.update(entry.day for entry in self.state.entries)
        return sorted(days)

    def calendar(self) -> List[DaySchedule]:
        return group_by_day(self.state.entries, self.available_days())

    def map_markers(self, all_days: bool = True) -> List[MapMarker]:
        entries = self.state.entries if all_days else self.filtered_entries()
        return build_markers(entries)

    def category_stats(self) -> Dict[int, Dict[str, int]]:
        return category_counts_by_day(self.state.entries)

    def find(self, entry_id: int) -> Optional[ScheduleEntry]:
        for entry in self.state.entries:
            if entry.id == entry_id:
                return entry
        return None

    # Selection

    def select_day(self, day: int) -> None:
        if day < 1:
            raise ValueError("day must be 1 or greater")
        self.state.selected_day = day

    def set_view_mode(self, mode: ViewMode) -> None:
        self.state.view_mode = ViewMode(mode)

    # Mutations

    async def create(self, fields: ScheduleFields | dict) -> bool:
        """Add an entry from the create form, then re-fetch."""
        if self.reject_if_busy("create"):
            return False

        with self.busy():
            try:
                entry = await self.repository.create(fields)
            except ValidationError as e:
                self.notify(f"⚠️ 필수 항목을 입력해주세요: {', '.join(e.fields)}", "error")
                return False
            except StoreUnavailable as e:
                logger.error(f"Error creating schedule: {e}")
                self.notify("❌ 일정을 추가하지 못했습니다.", "error")
                return False

            await self._reload()
            self.state.selected_day = entry.day
            self.notify(f"✅ '{entry.title}' 일정이 추가되었습니다.")
            return True

    def begin_edit(self, entry: ScheduleEntry) -> bool:
        """
        Start editing an entry.

        An unsaved edit of another entry is discarded without warning.
        Refused while a change is in flight.
        """
        if self.reject_if_busy("begin edit"):
            return False
        if self.state.editing_id is not None and self.state.editing_id != entry.id:
            logger.debug(f"Discarding unsaved edit of entry {self.state.editing_id}")
        self.state.editing_id = entry.id
        self.state.edit_buffer = entry.editable_fields()
        return True

    def update_edit_buffer(self, **fields) -> bool:
        if self.state.editing_id is None:
            raise RuntimeError("No entry is being edited")
        unknown = set(fields) - set(EDITABLE_FIELDS)
        if unknown:
            raise KeyError(f"Not editable: {', '.join(sorted(unknown))}")
        if self.reject_if_busy("edit"):
            return False
        self.state.edit_buffer.update(fields)
        return True

    def cancel_edit(self) -> bool:
        if self.reject_if_busy("cancel edit"):
            return False
        self._clear_edit()
        return True

    def _clear_edit(self) -> None:
        self.state.editing_id = None
        self.state.edit_buffer = {}

    async def commit_edit(self) -> bool:
        """
        Save the edit buffer.

        On success the edit ends and the snapshot is re-fetched. On failure
        the buffer is kept so the user can retry.
        """
        entry_id = self.state.editing_id
        if entry_id is None:
            return False
        if self.reject_if_busy("commit edit"):
            return False

        with self.busy():
            try:
                await self.repository.update(entry_id, dict(self.state.edit_buffer))
            except ValidationError as e:
                self.notify(f"⚠️ 필수 항목을 입력해주세요: {', '.join(e.fields)}", "error")
                return False
            except StoreUnavailable as e:
                logger.error(f"Error updating schedule {entry_id}: {e}")
                self.notify("❌ 일정을 수정하지 못했습니다.", "error")
                return False

            if self.state.editing_id == entry_id:
                self._clear_edit()
            await self._reload()
            self.notify("✅ 일정이 수정되었습니다.")
            return True

    async def remove(self, entry_id: int, confirmed: bool) -> bool:
        """
        Delete an entry after the user confirmed it.

        Declining the confirmation leaves everything untouched.
        """
        if not confirmed:
            return False
        if self.reject_if_busy("delete"):
            return False

        with self.busy():
            try:
                await self.repository.remove(entry_id)
            except StoreUnavailable as e:
                logger.error(f"Error deleting schedule {entry_id}: {e}")
                self.notify("❌ 일정을 삭제하지 못했습니다.", "error")
                return False

            if self.state.editing_id == entry_id:
                self._clear_edit()
            await self._reload()
            self.notify("🗑️ 일정이 삭제되었습니다.")
            return True
