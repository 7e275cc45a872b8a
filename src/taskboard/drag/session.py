"""DragSession - tracks the drag gesture in flight on one board."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from taskboard.drag.models import DragState, MoveIntent

logger = logging.getLogger(__name__)


class DragSession:
    """State machine for a single board's drag gesture.

    States are Idle and Dragging(task_id, source_column_id). The session,
    not the drag transport's payload, records what is being dragged: the
    transport event is only a trigger.
    """

    def __init__(self) -> None:
        """Initialize an idle session."""
        self._task_id: str | None = None
        self._source_column_id: str | None = None

    @property
    def state(self) -> DragState:
        """Current state."""
        return DragState.DRAGGING if self._task_id is not None else DragState.IDLE

    @property
    def task_id(self) -> str | None:
        """Task being dragged, if any."""
        return self._task_id

    @property
    def source_column_id(self) -> str | None:
        """Column the drag started from, if any."""
        return self._source_column_id

    def begin(self, task_id: str, source_column_id: str) -> None:
        """Idle -> Dragging. A new gesture replaces one still in flight.

        Args:
            task_id: Task under the pointer.
            source_column_id: Column currently holding the task.
        """
        if self._task_id is not None:
            logger.debug("Drag of %s superseded by %s", self._task_id, task_id)
        self._task_id = task_id
        self._source_column_id = source_column_id
        logger.debug("Drag started: task %s from %s", task_id, source_column_id)

    def end(self) -> None:
        """Any state -> Idle. Safe to call repeatedly."""
        if self._task_id is not None:
            logger.debug("Drag ended: task %s", self._task_id)
        self._task_id = None
        self._source_column_id = None

    def drop(self, target_column_id: str) -> MoveIntent | None:
        """Complete the gesture over a column.

        The session always returns to Idle.

        Args:
            target_column_id: Column the task was dropped on.

        Returns:
            The move to perform, or None when there is nothing to do (no
            drag in flight, or dropped back on the source column).
        """
        task_id, source_column_id = self._task_id, self._source_column_id
        self.end()

        if task_id is None or source_column_id is None:
            logger.warning("Drop ignored: no active drag")
            return None
        if source_column_id == target_column_id:
            logger.debug("Drop ignored: task %s stayed in %s", task_id, source_column_id)
            return None

        return MoveIntent(
            task_id=task_id,
            source_column_id=source_column_id,
            target_column_id=target_column_id,
        )

    @contextmanager
    def gesture(self, task_id: str, source_column_id: str) -> Iterator[DragSession]:
        """Run a drag gesture that is guaranteed to end.

        Example:
            with session.gesture("t1", "todo"):
                intent = session.drop("done")
        """
        self.begin(task_id, source_column_id)
        try:
            yield self
        finally:
            self.end()
