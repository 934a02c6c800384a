from classboard.core.config import Settings
from classboard.db.session import Database
from classboard.store.base import RecordStore
from classboard.store.memory import MemoryRecordStore
from classboard.store.sql import SqlRecordStore


def build_store(settings: Settings, database: Database) -> RecordStore:
    backend = settings.store_backend.lower()
    if backend == "memory":
        return MemoryRecordStore()
    if backend == "sql":
        return SqlRecordStore(database)
    raise ValueError(f"Unknown store backend: {settings.store_backend!r}")


__all__ = [
    "RecordStore",
    "MemoryRecordStore",
    "SqlRecordStore",
    "build_store",
]
