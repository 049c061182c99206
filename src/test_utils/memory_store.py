import asyncio
from datetime import datetime, timedelta, timezone
from typing import Optional

from record_store import RecordStoreError, Row
from record_store.protocols import OrderBy


class InMemoryRecordStore:
    """
    Record store stand-in keeping rows in dictionaries.

    Ids and timestamps are assigned the way the hosted store does it. Set
    ``fail_on`` to operation names ("select", "insert", ...) to make those
    calls raise RecordStoreError. ``calls`` records every operation attempted.
    ``hold(operation)`` returns an event that keeps the next calls of that
    operation pending until it is set; a held select answers with the rows
    read before it was held.
    """

    def __init__(self):
        self.tables: dict[str, dict[int, Row]] = {}
        self.calls: list[tuple[str, str]] = []
        self.fail_on: set[str] = set()
        self.held: dict[str, asyncio.Event] = {}
        self._next_id = 1
        self._clock = datetime(2025, 3, 1, 9, 0, tzinfo=timezone.utc)

    def _now(self) -> str:
        # Strictly increasing so created_at ordering is deterministic
        self._clock += timedelta(seconds=1)
        return self._clock.isoformat()

    def _record(self, operation: str, table: str) -> None:
        self.calls.append((operation, table))
        if operation in self.fail_on:
            raise RecordStoreError(f"{operation} {table} failed", status_code=503)

    def hold(self, operation: str) -> asyncio.Event:
        event = asyncio.Event()
        self.held[operation] = event
        return event

    async def _wait(self, operation: str) -> None:
        event = self.held.get(operation)
        if event is not None:
            await event.wait()

    def rows(self, table: str) -> dict[int, Row]:
        return self.tables.setdefault(table, {})

    async def select(self, table: str, order_by: OrderBy = ()) -> list[Row]:
        self._record("select", table)
        rows = [dict(row) for row in self.rows(table).values()]
        for field, ascending in reversed(list(order_by)):
            rows.sort(key=lambda row: row[field], reverse=not ascending)
        await self._wait("select")
        return rows

    async def select_one(self, table: str, row_id: int) -> Optional[Row]:
        self._record("select", table)
        row = self.rows(table).get(row_id)
        return dict(row) if row else None

    async def insert(self, table: str, row: Row) -> Row:
        self._record("insert", table)
        await self._wait("insert")
        now = self._now()
        stored = {**row, "id": self._next_id, "created_at": now, "updated_at": now}
        self.rows(table)[self._next_id] = stored
        self._next_id += 1
        return dict(stored)

    async def update(self, table: str, row_id: int, fields: Row) -> Optional[Row]:
        self._record("update", table)
        await self._wait("update")
        row = self.rows(table).get(row_id)
        if row is None:
            return None
        row.update(fields)
        row["updated_at"] = self._now()
        return dict(row)

    async def delete(self, table: str, row_id: int) -> None:
        self._record("delete", table)
        await self._wait("delete")
        self.rows(table).pop(row_id, None)

    def count(self, operation: str) -> int:
        return sum(1 for op, _ in self.calls if op == operation)
