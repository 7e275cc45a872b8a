"""Data models for the board controller."""

from dataclasses import dataclass


@dataclass
class BoardOutputs:
    """Serialized values handed to the host after each change.

    Attributes:
        updated_tasks_data: Board as JSON `{tasks, columns, columnOrder}`.
        last_moved_task: Last change event as JSON, or "" before any move.
    """

    updated_tasks_data: str
    last_moved_task: str
