"""Data models for the board loader."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from taskboard.board import BoardData


@runtime_checkable
class Record(Protocol):
    """A record from the host's authoritative store."""

    record_id: str

    def get_formatted_value(self, alias: str) -> str | None:
        """Read one field by its alias. May raise."""
        ...


@dataclass
class SnapshotRecord:
    """Plain in-memory record.

    Attributes:
        record_id: Identity in the external store.
        fields: Field alias -> formatted value.
    """

    record_id: str
    fields: dict[str, str] = field(default_factory=dict)

    def get_formatted_value(self, alias: str) -> str | None:
        """Read a field; raises KeyError for aliases the record lacks."""
        return self.fields[alias]


@dataclass
class Snapshot:
    """One refresh cycle's input from the host.

    Attributes:
        records: Full record collection, if the host supplies one.
        loading: True while the host is still fetching records.
        legacy_raw: Raw JSON of a legacy bundle, if configured.
    """

    records: Sequence[Record] | None = None
    loading: bool = False
    legacy_raw: str | None = None


class LoadSource(StrEnum):
    """Where a loaded board came from."""

    RECORDS = "records"
    LEGACY = "legacy"
    SAMPLES = "samples"
    PREVIOUS = "previous"


@dataclass
class LoadResult:
    """Outcome of a load."""

    board: BoardData
    source: LoadSource
