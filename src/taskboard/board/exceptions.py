"""Custom exceptions for board state."""


class BoardError(Exception):
    """Base exception for board state errors."""


class TaskNotFoundError(BoardError):
    """Task with given ID is not on the board."""


class ColumnNotFoundError(BoardError):
    """Column with given ID is not on the board."""
