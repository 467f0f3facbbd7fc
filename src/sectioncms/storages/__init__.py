from .base import ContentStore, KnownPage, StoredSection, StoreResult
from .db import DBContentStore

__all__ = [
    "ContentStore",
    "DBContentStore",
    "KnownPage",
    "StoredSection",
    "StoreResult",
]
