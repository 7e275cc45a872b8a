"""Drag session - which task is being dragged from which column."""

from taskboard.drag.models import DragState, MoveIntent
from taskboard.drag.session import DragSession

__all__ = [
    "DragSession",
    "DragState",
    "MoveIntent",
]
