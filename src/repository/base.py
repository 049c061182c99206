import logging
from typing import Awaitable, TypeVar

import pydantic

from record_store import RecordStoreError, RecordStoreProtocol, Row
from .errors import StoreUnavailable, ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")
M = TypeVar("M", bound=pydantic.BaseModel)


class BaseRepository:
    """Maps application operations for one table onto record store calls."""

    def __init__(self, store: RecordStoreProtocol, table: str):
        self.store = store
        self.table = table

    async def _call(self, call: Awaitable[T], action: str) -> T:
        try:
            return await call
        except RecordStoreError as e:
            logger.error(f"Failed to {action} in {self.table}: {e}")
            raise StoreUnavailable(f"Could not {action}: {e}") from e

    @staticmethod
    def _parse(model: type[M], fields: M | dict) -> M:
        if isinstance(fields, model):
            return fields
        try:
            return model.model_validate(fields)
        except pydantic.ValidationError as e:
            names = tuple(str(err["loc"][0]) for err in e.errors() if err["loc"])
            raise ValidationError(f"Invalid fields: {', '.join(names)}", names) from e

    def _load(self, model: type[M], row: Row, action: str) -> M:
        """Build a model from a stored row; a row that does not fit is a store failure."""
        try:
            return model.model_validate(row)
        except pydantic.ValidationError as e:
            logger.error(f"Unreadable row from {self.table} during {action}: {row!r} ({e})")
            raise StoreUnavailable(f"Could not {action}: malformed row {row.get('id')}") from e
