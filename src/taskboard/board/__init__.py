"""Board state - tasks projected into status-defined columns."""

from taskboard.board.builder import (
    assign_task,
    build_board,
    find_column_of,
    normalize_board,
    validate_board,
)
from taskboard.board.classifier import (
    DEFAULT_COLUMN_DEFINITIONS,
    classify,
    parse_quick_column_setup,
)
from taskboard.board.exceptions import BoardError, ColumnNotFoundError, TaskNotFoundError
from taskboard.board.models import BoardData, Column, ColumnDefinition, Task

__all__ = [
    "DEFAULT_COLUMN_DEFINITIONS",
    "BoardData",
    "BoardError",
    "Column",
    "ColumnDefinition",
    "ColumnNotFoundError",
    "Task",
    "TaskNotFoundError",
    "assign_task",
    "build_board",
    "classify",
    "find_column_of",
    "normalize_board",
    "parse_quick_column_setup",
    "validate_board",
]
