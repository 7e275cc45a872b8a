"""MoveEngine - moves a task between columns and emits the change."""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from taskboard.board import BoardData
from taskboard.moves.models import TaskMoved

if TYPE_CHECKING:
    from collections.abc import Callable

    from taskboard.events import EventManager

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class MoveEngine:
    """Applies moves to a board.

    Boards are treated as values: a move returns a new BoardData and leaves
    the input untouched. The change notification is emitted after the new
    board is complete and is not acknowledged or retried.
    """

    def __init__(
        self,
        event_manager: EventManager | None = None,
        board_id: str = "default",
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        """Initialize the MoveEngine.

        Args:
            event_manager: Receives a task_moved event per move, if given.
            board_id: Board the events are tagged with.
            clock: Source of move timestamps.
        """
        self.event_manager = event_manager
        self.board_id = board_id
        self.clock = clock
        self.last_change: TaskMoved | None = None

    def move_task(
        self,
        task_id: str,
        source_column_id: str,
        target_column_id: str,
        board: BoardData,
    ) -> BoardData:
        """Move a task to the end of another column.

        No-op (same board returned, nothing emitted) when source and target
        are equal, when the task or either column is not on the board, or
        when the task is not in the source column.

        Args:
            task_id: Local id of the task.
            source_column_id: Column the task leaves.
            target_column_id: Column the task joins.
            board: Current board.

        Returns:
            The board after the move.
        """
        if source_column_id == target_column_id:
            return board

        source = board.columns.get(source_column_id)
        target = board.columns.get(target_column_id)
        task = board.tasks.get(task_id)
        if source is None or target is None or task is None:
            logger.warning(
                "Move ignored: cannot resolve task %s or columns %s -> %s",
                task_id,
                source_column_id,
                target_column_id,
            )
            return board
        if task_id not in source.task_ids:
            logger.warning("Move ignored: task %s is not in column %s", task_id, source_column_id)
            return board

        source_ids = list(source.task_ids)
        source_ids.remove(task_id)
        moved_task = replace(task, status=target.target_status, is_optimistic=True)

        columns = dict(board.columns)
        columns[source_column_id] = replace(source, task_ids=source_ids)
        columns[target_column_id] = replace(target, task_ids=[*target.task_ids, task_id])
        tasks = dict(board.tasks)
        tasks[task_id] = moved_task
        new_board = BoardData(tasks=tasks, columns=columns, column_order=list(board.column_order))

        change = TaskMoved(
            task_identity=moved_task.identity,
            new_status=moved_task.status,
            previous_status=source.title,
            title=moved_task.title,
            timestamp=self.clock(),
        )
        self.last_change = change
        logger.info(
            "Moved task %s from %s to %s (status %r)",
            task_id,
            source_column_id,
            target_column_id,
            moved_task.status,
        )
        if self.event_manager is not None:
            self.event_manager.emit_task_moved(self.board_id, change)

        return new_board
