"""BoardLoader - picks a data source for each refresh cycle."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from taskboard.loader.exceptions import LegacyBundleError
from taskboard.loader.legacy import parse_legacy_bundle
from taskboard.loader.models import LoadResult, LoadSource
from taskboard.loader.records import task_from_record
from taskboard.loader.samples import sample_board
from taskboard.reconciler import OptimisticReconciler

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from taskboard.board import BoardData, ColumnDefinition, Task
    from taskboard.loader.models import Record, Snapshot

logger = logging.getLogger(__name__)


class BoardLoader:
    """Turns a host snapshot into a board.

    Source precedence:
    1. a loaded, non-empty record collection (reconciled with the previous board)
    2. a legacy JSON bundle
    3. fallback data

    A record load that yields no tasks switches to fallback data instead of
    showing an empty board. A legacy bundle that fails to parse keeps the
    previous board.
    """

    def __init__(
        self,
        definitions: Sequence[ColumnDefinition],
        use_fallback_data: bool = False,
        fallback: Callable[[Sequence[ColumnDefinition]], BoardData] = sample_board,
    ) -> None:
        """Initialize the loader.

        Args:
            definitions: Column definitions for every board built.
            use_fallback_data: Always load fallback data, ignoring the snapshot.
            fallback: Builds the fallback board.
        """
        self.definitions = tuple(definitions)
        self.use_fallback_data = use_fallback_data
        self.fallback = fallback
        self.reconciler = OptimisticReconciler(self.definitions)

    def load(self, snapshot: Snapshot, previous: BoardData) -> LoadResult:
        """Load a board for one refresh cycle.

        Args:
            snapshot: Host input for this cycle.
            previous: Current board; consulted for optimistic tasks and kept
                when a legacy bundle is malformed.

        Returns:
            LoadResult with the new board and its source.
        """
        if self.use_fallback_data:
            logger.info("Fallback data forced by configuration")
            return self._load_fallback()

        if snapshot.records and not snapshot.loading:
            logger.info("Loading %d record(s)", len(snapshot.records))
            board = self.reconciler.rebuild(previous, self._tasks_from(snapshot.records))
            if not board.tasks:
                logger.info("Records yielded no tasks, falling back")
                return self._load_fallback()
            return LoadResult(board=board, source=LoadSource.RECORDS)

        if snapshot.legacy_raw:
            logger.info("Loading legacy bundle")
            try:
                board = parse_legacy_bundle(snapshot.legacy_raw, self.definitions)
            except LegacyBundleError as e:
                logger.warning("Keeping previous board: %s", e)
                return LoadResult(board=previous, source=LoadSource.PREVIOUS)
            return LoadResult(board=board, source=LoadSource.LEGACY)

        return self._load_fallback()

    def _load_fallback(self) -> LoadResult:
        return LoadResult(board=self.fallback(self.definitions), source=LoadSource.SAMPLES)

    @staticmethod
    def _tasks_from(records: Sequence[Record]) -> list[Task]:
        tasks = []
        for record in records:
            task = task_from_record(record)
            if task is not None:
                tasks.append(task)
        return tasks
