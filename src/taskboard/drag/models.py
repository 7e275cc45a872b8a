"""Data models for drag sessions."""

from dataclasses import dataclass
from enum import StrEnum


class DragState(StrEnum):
    """Drag session state."""

    IDLE = "idle"
    DRAGGING = "dragging"


@dataclass(frozen=True)
class MoveIntent:
    """A completed drop that should move a task.

    Attributes:
        task_id: Task being moved.
        source_column_id: Column the drag started from.
        target_column_id: Column the task was dropped on.
    """

    task_id: str
    source_column_id: str
    target_column_id: str
