"""Move engine - applies drops to the board and announces them."""

from taskboard.moves.engine import MoveEngine
from taskboard.moves.models import TaskMoved

__all__ = [
    "MoveEngine",
    "TaskMoved",
]
