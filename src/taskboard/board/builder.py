"""Board construction and invariant maintenance."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from taskboard.board.classifier import classify
from taskboard.board.models import BoardData, Column

if TYPE_CHECKING:
    from collections.abc import Sequence

    from taskboard.board.models import ColumnDefinition, Task

logger = logging.getLogger(__name__)


def build_board(definitions: Sequence[ColumnDefinition]) -> BoardData:
    """Create an empty board with one column per definition, in order."""
    board = BoardData()
    for definition in definitions:
        board.columns[definition.id] = Column.from_definition(definition)
        board.column_order.append(definition.id)
    return board


def assign_task(task: Task, board: BoardData, definitions: Sequence[ColumnDefinition]) -> None:
    """Insert a task and append it to the column its status classifies to.

    A task id already on the board is replaced and re-placed, so an id never
    appears in two columns.
    """
    if task.id in board.tasks:
        _unplace(board, task.id)
    board.tasks[task.id] = task

    column_id = classify(task.status, definitions)
    if column_id is None or column_id not in board.columns:
        logger.debug("Task %s has no column to land in", task.id)
        return
    board.columns[column_id].task_ids.append(task.id)


def find_column_of(board: BoardData, task_id: str) -> str | None:
    """Return the id of the column holding a task, if any."""
    for column_id in board.column_order:
        column = board.columns.get(column_id)
        if column is not None and task_id in column.task_ids:
            return column_id
    return None


def normalize_board(board: BoardData, definitions: Sequence[ColumnDefinition]) -> BoardData:
    """Restore board invariants on data that came from outside.

    - column order matches the column key set (configured columns first)
    - dangling and duplicate task ids are dropped, first placement wins
    - tasks placed nowhere are assigned by status

    Args:
        board: Board to repair in place.
        definitions: Configured column definitions.

    Returns:
        The same board object.
    """
    configured = [d.id for d in definitions if d.id in board.columns]
    rest = [cid for cid in board.column_order if cid in board.columns and cid not in configured]
    rest += [cid for cid in board.columns if cid not in configured and cid not in rest]
    board.column_order = configured + rest

    placed: set[str] = set()
    for column_id in board.column_order:
        column = board.columns[column_id]
        kept: list[str] = []
        for task_id in column.task_ids:
            if task_id not in board.tasks or task_id in placed:
                logger.warning("Dropping task id %s from column %s", task_id, column_id)
                continue
            placed.add(task_id)
            kept.append(task_id)
        column.task_ids = kept

    for task in list(board.tasks.values()):
        if task.id not in placed:
            assign_task(task, board, definitions)

    return board


def validate_board(board: BoardData) -> list[str]:
    """Check board invariants.

    Returns:
        Human-readable violations; empty when the board is sound.
    """
    problems: list[str] = []

    if len(board.column_order) != len(set(board.column_order)):
        problems.append("column order contains duplicates")
    if set(board.column_order) != set(board.columns):
        problems.append("column order does not match columns")

    for task_id, task in board.tasks.items():
        if task.id != task_id:
            problems.append(f"task key {task_id} holds task {task.id}")
    for column_id, column in board.columns.items():
        if column.id != column_id:
            problems.append(f"column key {column_id} holds column {column.id}")

    seen: dict[str, str] = {}
    for column_id, column in board.columns.items():
        for task_id in column.task_ids:
            if task_id not in board.tasks:
                problems.append(f"column {column_id} references unknown task {task_id}")
            if task_id in seen:
                problems.append(f"task {task_id} appears in {seen[task_id]} and {column_id}")
            seen.setdefault(task_id, column_id)

    return problems


def _unplace(board: BoardData, task_id: str) -> None:
    for column in board.columns.values():
        if task_id in column.task_ids:
            column.task_ids = [tid for tid in column.task_ids if tid != task_id]
