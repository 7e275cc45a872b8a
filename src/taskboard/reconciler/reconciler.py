"""OptimisticReconciler - keeps locally moved tasks stable across stale snapshots."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from taskboard.board import assign_task, build_board

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from taskboard.board import BoardData, ColumnDefinition, Task

logger = logging.getLogger(__name__)


def reconcile_task(previous: Task | None, incoming: Task) -> Task:
    """Decide which version of a task survives a refresh.

    - previous absent or not optimistic: incoming wins
    - previous optimistic, statuses differ: snapshot is stale, keep the local
      status and the optimistic flag
    - previous optimistic, statuses equal: converged, clear the flag

    Neither argument is modified.

    Args:
        previous: Task from the board before the refresh, if any.
        incoming: Freshly read task for the same id.

    Returns:
        The task to place on the new board.
    """
    if previous is None or not previous.is_optimistic:
        return incoming
    if incoming.status != previous.status:
        logger.debug(
            "Task %s: snapshot status %r is stale, keeping %r",
            incoming.id,
            incoming.status,
            previous.status,
        )
        return replace(incoming, status=previous.status, is_optimistic=True)
    logger.debug("Task %s converged on status %r", incoming.id, incoming.status)
    return replace(incoming, is_optimistic=False)


@dataclass
class ReconcileStats:
    """Counters from the last rebuild.

    Attributes:
        total: Tasks placed on the new board.
        stale: Optimistic tasks whose snapshot was still behind.
        converged: Optimistic tasks confirmed by the snapshot.
    """

    total: int = 0
    stale: int = 0
    converged: int = 0


class OptimisticReconciler:
    """Builds a fresh board from an authoritative snapshot.

    Each incoming task is merged with its previous version via
    `reconcile_task` and then classified into a column. Tasks missing from
    the snapshot are dropped.
    """

    def __init__(self, definitions: Sequence[ColumnDefinition]) -> None:
        """Initialize the reconciler.

        Args:
            definitions: Column definitions used for classification.
        """
        self.definitions = tuple(definitions)
        self.last_stats = ReconcileStats()

    def rebuild(self, previous: BoardData, incoming: Iterable[Task]) -> BoardData:
        """Merge a snapshot into a new board.

        Args:
            previous: Board before the refresh; left untouched.
            incoming: Tasks from the snapshot, in arrival order.

        Returns:
            A new BoardData.
        """
        board = build_board(self.definitions)
        stats = ReconcileStats()

        for task in incoming:
            prior = previous.tasks.get(task.id)
            merged = reconcile_task(prior, task)
            if prior is not None and prior.is_optimistic:
                if merged.is_optimistic:
                    stats.stale += 1
                else:
                    stats.converged += 1
            assign_task(merged, board, self.definitions)

        stats.total = len(board.tasks)
        self.last_stats = stats
        logger.info(
            "Rebuilt board with %d task(s) (%d stale, %d converged)",
            stats.total,
            stats.stale,
            stats.converged,
        )
        return board
