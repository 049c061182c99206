from .client import RecordStoreClient, RecordStoreError
from .protocols import RecordStoreProtocol, Row

__all__ = [
    "RecordStoreClient",
    "RecordStoreError",
    "RecordStoreProtocol",
    "Row",
]
