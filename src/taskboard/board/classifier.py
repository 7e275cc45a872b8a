"""Column classification: which column a status belongs to."""

from __future__ import annotations

from typing import TYPE_CHECKING

from taskboard.board.models import ColumnDefinition

if TYPE_CHECKING:
    from collections.abc import Sequence

DEFAULT_COLUMN_DEFINITIONS: tuple[ColumnDefinition, ...] = (
    ColumnDefinition(id="todo", title="To Do", status_values=("Todo", "New", "Open")),
    ColumnDefinition(
        id="inprogress",
        title="In Progress",
        status_values=("In Progress", "Active", "Working"),
    ),
    ColumnDefinition(id="review", title="Review", status_values=("Review", "Testing", "Validation")),
    ColumnDefinition(id="done", title="Done", status_values=("Done", "Completed", "Closed")),
)


def classify(status: str, definitions: Sequence[ColumnDefinition]) -> str | None:
    """Map a status to a column id.

    The first definition with a case-insensitive alias match wins. Unknown
    statuses fall back to the first column.

    Args:
        status: Raw status string.
        definitions: Column definitions in configured order.

    Returns:
        Column id, or None when there are no definitions.
    """
    for definition in definitions:
        if definition.accepts(status):
            return definition.id
    if not definitions:
        return None
    return definitions[0].id


def parse_quick_column_setup(setup: str) -> list[ColumnDefinition]:
    """Build column definitions from a one-line setup string.

    Accepts "[A, B, C]", "A|B|C" or "A,B,C". Each entry becomes one column
    whose title and only alias is the entry itself.

    Args:
        setup: Setup string.

    Returns:
        Definitions with ids col_0, col_1, ...
    """
    setup = setup.strip()
    if setup.startswith("[") and setup.endswith("]"):
        parts = setup[1:-1].split(",")
    elif "|" in setup:
        parts = setup.split("|")
    else:
        parts = setup.split(",")

    statuses = [part.strip() for part in parts if part.strip()]
    return [
        ColumnDefinition(id=f"col_{index}", title=status, status_values=(status,))
        for index, status in enumerate(statuses)
    ]
