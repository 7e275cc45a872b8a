"""BoardController - the host-facing board component."""

from __future__ import annotations

import json
import logging
import threading
from typing import TYPE_CHECKING

from taskboard.board import (
    ColumnNotFoundError,
    TaskNotFoundError,
    build_board,
    find_column_of,
)
from taskboard.controller.models import BoardOutputs
from taskboard.drag import DragSession
from taskboard.loader import BoardLoader, LoadSource
from taskboard.moves import MoveEngine

if TYPE_CHECKING:
    from collections.abc import Sequence

    from taskboard.board import BoardData, ColumnDefinition
    from taskboard.events import EventManager
    from taskboard.loader import Snapshot
    from taskboard.moves import TaskMoved

logger = logging.getLogger(__name__)


class BoardController:
    """Owns one board's state and its drag session.

    Each operation runs to completion before the next begins: a per-board
    lock serializes refreshes, drags and drops, so callers on different
    threads (e.g. FastAPI's worker pool) see the same ordering a single
    event-driven thread would.
    """

    def __init__(
        self,
        definitions: Sequence[ColumnDefinition],
        event_manager: EventManager | None = None,
        loader: BoardLoader | None = None,
        board_id: str = "default",
    ) -> None:
        """Initialize the controller with an empty board.

        Args:
            definitions: Column definitions, fixed for the controller's life.
            event_manager: Receives board_loaded and task_moved events.
            loader: Loader for refresh cycles; defaults to a BoardLoader over
                the same definitions.
            board_id: Identifier used to tag events.
        """
        self.definitions = tuple(definitions)
        self.event_manager = event_manager
        self.board_id = board_id
        self.loader = loader or BoardLoader(self.definitions)
        self.session = DragSession()
        self.move_engine = MoveEngine(event_manager=event_manager, board_id=board_id)
        self.board: BoardData = build_board(self.definitions)
        self.last_source: LoadSource | None = None
        # Reentrant: drop() calls move_task() while holding it
        self._lock = threading.RLock()

    def refresh(self, snapshot: Snapshot) -> BoardData:
        """Run one refresh cycle and replace the board.

        Args:
            snapshot: Host input for this cycle.

        Returns:
            The new board.
        """
        with self._lock:
            result = self.loader.load(snapshot, previous=self.board)
            self.board = result.board
            self.last_source = result.source
            logger.info(
                "Board %s loaded from %s (%d task(s))",
                self.board_id,
                result.source,
                len(self.board.tasks),
            )
            if self.event_manager is not None:
                self.event_manager.emit_board_loaded(
                    self.board_id, result.source.value, len(self.board.tasks)
                )
            return self.board

    def begin_drag(self, task_id: str, source_column_id: str | None = None) -> None:
        """Start dragging a task.

        Args:
            task_id: Task under the pointer.
            source_column_id: Column holding the task; looked up when omitted.

        Raises:
            TaskNotFoundError: If the task is not on the board.
            ColumnNotFoundError: If the given source column is not on the board.
        """
        with self._lock:
            if task_id not in self.board.tasks:
                raise TaskNotFoundError(f"Task '{task_id}' not on board {self.board_id}")

            if source_column_id is None:
                source_column_id = find_column_of(self.board, task_id)
                if source_column_id is None:
                    raise TaskNotFoundError(f"Task '{task_id}' is not in any column")
            elif source_column_id not in self.board.columns:
                raise ColumnNotFoundError(
                    f"Column '{source_column_id}' not on board {self.board_id}"
                )

            self.session.begin(task_id, source_column_id)

    def drop(self, target_column_id: str) -> TaskMoved | None:
        """Finish the drag over a column.

        Args:
            target_column_id: Column the task was dropped on.

        Returns:
            The emitted change, or None when the drop was a no-op.
        """
        with self._lock:
            intent = self.session.drop(target_column_id)
            if intent is None:
                return None
            return self.move_task(
                intent.task_id, intent.source_column_id, intent.target_column_id
            )

    def cancel_drag(self) -> None:
        """Abort the drag without touching the board."""
        with self._lock:
            self.session.end()

    def move_task(
        self, task_id: str, source_column_id: str, target_column_id: str
    ) -> TaskMoved | None:
        """Move a task directly.

        Returns:
            The emitted change, or None when the move was a no-op.
        """
        with self._lock:
            before = self.board
            self.board = self.move_engine.move_task(
                task_id, source_column_id, target_column_id, self.board
            )
            if self.board is before:
                return None
            return self.move_engine.last_change

    def get_outputs(self) -> BoardOutputs:
        """Serialize the board and the last move for the host."""
        with self._lock:
            board, change = self.board, self.move_engine.last_change
        return BoardOutputs(
            updated_tasks_data=json.dumps(board.to_dict()),
            last_moved_task=change.to_json() if change is not None else "",
        )
