from typing import Any, Optional, Protocol, Sequence, Tuple

Row = dict[str, Any]
OrderBy = Sequence[Tuple[str, bool]]


class RecordStoreProtocol(Protocol):
    """Generic row contract of the hosted record store, one table at a time."""

    async def select(self, table: str, order_by: OrderBy = ()) -> list[Row]: ...

    async def select_one(self, table: str, row_id: int) -> Optional[Row]: ...

    async def insert(self, table: str, row: Row) -> Row: ...

    async def update(self, table: str, row_id: int, fields: Row) -> Optional[Row]: ...

    async def delete(self, table: str, row_id: int) -> None: ...
