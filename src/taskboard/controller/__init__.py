"""Board controller - ties loading, dragging and moving together per board."""

from taskboard.controller.controller import BoardController
from taskboard.controller.models import BoardOutputs

__all__ = [
    "BoardController",
    "BoardOutputs",
]
