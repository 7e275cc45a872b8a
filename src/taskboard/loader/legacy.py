"""Legacy bundle parsing: JSON board data or a flat task list."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from taskboard.board import BoardData, Task, assign_task, build_board, normalize_board
from taskboard.loader.exceptions import LegacyBundleError
from taskboard.logging import truncate_output

if TYPE_CHECKING:
    from collections.abc import Sequence

    from taskboard.board import ColumnDefinition

logger = logging.getLogger(__name__)


def parse_legacy_bundle(raw: str, definitions: Sequence[ColumnDefinition]) -> BoardData:
    """Parse a legacy bundle into a board.

    Supported shapes:
    - `{tasks, columns, columnOrder}` (or any object): shallow-merged over an
      empty board, then normalized
    - `[task, ...]`: each task classified by its status

    Args:
        raw: JSON text.
        definitions: Column definitions for the empty board and classification.

    Returns:
        Parsed board.

    Raises:
        LegacyBundleError: If the text is not JSON or has an unusable shape.
    """
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as e:
        raise LegacyBundleError(
            f"Invalid JSON in legacy bundle: {e} ({truncate_output(raw, 200)!r})"
        ) from e

    if isinstance(parsed, list):
        return _from_task_list(parsed, definitions)
    if isinstance(parsed, dict):
        return _from_board_object(parsed, definitions)

    raise LegacyBundleError(f"Unsupported legacy bundle type: {type(parsed).__name__}")


def _from_task_list(entries: list[Any], definitions: Sequence[ColumnDefinition]) -> BoardData:
    board = build_board(definitions)
    for entry in entries:
        if not isinstance(entry, dict) or not entry.get("id"):
            logger.warning("Skipping legacy task entry without an id: %r", entry)
            continue
        assign_task(Task.from_dict(entry), board, definitions)
    return board


def _from_board_object(
    parsed: dict[str, Any], definitions: Sequence[ColumnDefinition]
) -> BoardData:
    merged = build_board(definitions).to_dict()
    merged.update(parsed)
    try:
        board = BoardData.from_dict(merged)
    except (AttributeError, TypeError, ValueError) as e:
        raise LegacyBundleError(f"Malformed legacy board data: {e}") from e
    return normalize_board(board, definitions)
