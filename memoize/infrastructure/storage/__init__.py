"""Record store implementations."""

from .memory_record_store import InMemoryBackend, InMemoryRecordStore
from .sql_record_store import SqlRecordStore

__all__ = ["InMemoryBackend", "InMemoryRecordStore", "SqlRecordStore"]
