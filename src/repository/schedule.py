"""Repository for itinerary schedule entries."""

import logging
from typing import List, Optional

from models import ScheduleEntry, ScheduleFields, ScheduleUpdate
from record_store import RecordStoreProtocol
from .base import BaseRepository
from .errors import NotFound, ValidationError

logger = logging.getLogger(__name__)

SCHEDULE_ORDER = (("day", True), ("time", True))


class ItineraryRepository(BaseRepository):
    """Create, list, update and delete schedule entries in the record store."""

    def __init__(self, store: RecordStoreProtocol, table: str = "travel_schedule"):
        super().__init__(store, table)

    async def list(self) -> List[ScheduleEntry]:
        """
        Fetch all entries ordered by day, then time.

        Raises:
            StoreUnavailable: If the store call fails. The caller's snapshot
                should be treated as unchanged, never as empty.
        """
        rows = await self._call(
            self.store.select(self.table, order_by=SCHEDULE_ORDER), "list entries"
        )
        return [self._load(ScheduleEntry, row, "list entries") for row in rows]

    async def get(self, entry_id: int) -> Optional[ScheduleEntry]:
        row = await self._call(self.store.select_one(self.table, entry_id), "fetch entry")
        return self._load(ScheduleEntry, row, "fetch entry") if row else None

    async def create(self, fields: ScheduleFields | dict) -> ScheduleEntry:
        """
        Insert a new entry.

        Args:
            fields: day, time, title and the optional description, category
                and location.

        Returns:
            The entry as stored, with its assigned id and timestamps.

        Raises:
            ValidationError: If time or title is blank. Nothing is sent.
            StoreUnavailable: If the store call fails.
        """
        parsed = self._parse(ScheduleFields, fields)
        self._require(parsed.missing_required())

        row = await self._call(
            self.store.insert(self.table, parsed.model_dump(mode="json")), "create entry"
        )
        entry = self._load(ScheduleEntry, row, "create entry")
        logger.info(f"Created schedule entry {entry.id} on day {entry.day}")
        return entry

    async def update(self, entry_id: int, fields: ScheduleUpdate | dict) -> ScheduleEntry:
        """
        Change the given fields of one entry.

        Raises:
            ValidationError: If a given time or title is blank. Nothing is sent.
            NotFound: If no entry has this id.
            StoreUnavailable: If the store call fails.
        """
        parsed = self._parse(ScheduleUpdate, fields)
        self._require(parsed.missing_required())

        row = await self._call(
            self.store.update(self.table, entry_id, parsed.changes()), "update entry"
        )
        if row is None:
            raise NotFound(f"Schedule entry {entry_id} does not exist")
        logger.info(f"Updated schedule entry {entry_id}")
        return self._load(ScheduleEntry, row, "update entry")

    async def remove(self, entry_id: int) -> None:
        """Delete an entry. Deleting an id that no longer exists is not an error."""
        await self._call(self.store.delete(self.table, entry_id), "delete entry")
        logger.info(f"Deleted schedule entry {entry_id}")

    @staticmethod
    def _require(missing: List[str]) -> None:
        if missing:
            raise ValidationError(f"Required: {', '.join(missing)}", tuple(missing))
