"""Record store - authoritative task records for the bundled host service."""

from taskboard.record_store.exceptions import RecordNotFoundError, RecordStoreError
from taskboard.record_store.models import TaskRecord
from taskboard.record_store.store import RecordStore

__all__ = [
    "RecordNotFoundError",
    "RecordStore",
    "RecordStoreError",
    "TaskRecord",
]
