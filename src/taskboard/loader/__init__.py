"""Board loader - reads host records, legacy bundles and fallback data."""

from taskboard.loader.exceptions import LegacyBundleError, LoaderError
from taskboard.loader.legacy import parse_legacy_bundle
from taskboard.loader.loader import BoardLoader
from taskboard.loader.models import LoadResult, LoadSource, Record, Snapshot, SnapshotRecord
from taskboard.loader.records import FIELD_ALIASES, read_field, task_from_record
from taskboard.loader.samples import SAMPLE_TASKS, sample_board

__all__ = [
    "FIELD_ALIASES",
    "SAMPLE_TASKS",
    "BoardLoader",
    "LegacyBundleError",
    "LoadResult",
    "LoadSource",
    "LoaderError",
    "Record",
    "Snapshot",
    "SnapshotRecord",
    "parse_legacy_bundle",
    "read_field",
    "sample_board",
    "task_from_record",
]
