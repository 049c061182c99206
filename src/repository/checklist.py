"""Repository for per-person checklist items."""

import logging
from typing import List, Sequence

from models import ChecklistItem
from record_store import RecordStoreProtocol
from .base import BaseRepository
from .errors import NotFound, ValidationError

logger = logging.getLogger(__name__)

CHECKLIST_ORDER = (("created_at", False),)


class ChecklistRepository(BaseRepository):
    """Checklist items for a fixed set of people."""

    def __init__(
        self,
        store: RecordStoreProtocol,
        people: Sequence[str],
        table: str = "checklist",
    ):
        super().__init__(store, table)
        if not people:
            raise ValueError("A checklist needs at least one person")
        self.people = list(people)

    async def list(self) -> List[ChecklistItem]:
        """Fetch all items, newest first."""
        rows = await self._call(
            self.store.select(self.table, order_by=CHECKLIST_ORDER), "list checklist"
        )
        return [self._load(ChecklistItem, row, "list checklist") for row in rows]

    async def create(self, person: str, title: str) -> ChecklistItem:
        """
        Add an item for a person. New items start uncompleted.

        Raises:
            ValidationError: If the title is blank or the person unknown.
            StoreUnavailable: If the store call fails.
        """
        self._validate_person(person)
        title = self._validate_title(title)

        row = await self._call(
            self.store.insert(
                self.table,
                {"person": person, "title": title, "is_completed": False},
            ),
            "create checklist item",
        )
        item = self._load(ChecklistItem, row, "create checklist item")
        logger.info(f"Created checklist item {item.id} for {person}")
        return item

    async def update(self, item_id: int, title: str) -> ChecklistItem:
        title = self._validate_title(title)
        return await self._update(item_id, {"title": title})

    async def toggle_complete(self, item_id: int, current_value: bool) -> ChecklistItem:
        """
        Flip the completion flag of an item.

        The new value is computed from ``current_value`` rather than re-read
        from the store, so a stale snapshot writes the wrong value.
        """
        return await self._update(item_id, {"is_completed": not current_value})

    async def remove(self, item_id: int) -> None:
        """Delete an item. Deleting an id that no longer exists is not an error."""
        await self._call(self.store.delete(self.table, item_id), "delete checklist item")
        logger.info(f"Deleted checklist item {item_id}")

    async def _update(self, item_id: int, fields: dict) -> ChecklistItem:
        row = await self._call(
            self.store.update(self.table, item_id, fields), "update checklist item"
        )
        if row is None:
            raise NotFound(f"Checklist item {item_id} does not exist")
        return self._load(ChecklistItem, row, "update checklist item")

    def _validate_person(self, person: str) -> None:
        if person not in self.people:
            raise ValidationError(f"Unknown person: {person}", ("person",))

    @staticmethod
    def _validate_title(title: str) -> str:
        title = (title or "").strip()
        if not title:
            raise ValidationError("Required: title", ("title",))
        return title
