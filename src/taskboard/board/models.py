"""Data models for board state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# Python attribute -> host wire key
_TASK_KEYS = {
    "id": "id",
    "title": "title",
    "status": "status",
    "priority": "priority",
    "assigned_to": "assignedTo",
    "due_date": "dueDate",
    "description": "description",
    "record_id": "recordId",
    "author_first_name": "authorFirstName",
    "author_last_name": "authorLastName",
    "author_email": "authorEmail",
    "author_avatar": "authorAvatar",
}


@dataclass
class Task:
    """A single card on the board.

    Attributes:
        id: Stable local identity.
        title: Card title.
        status: Free-text status; decides column membership.
        record_id: Identity in the external record store, used when persisting.
        is_optimistic: True while a local move awaits confirmation by the
            next authoritative snapshot.
    """

    id: str
    title: str = ""
    status: str = ""
    priority: str = ""
    assigned_to: str = ""
    due_date: str = ""
    description: str = ""
    record_id: str | None = None
    author_first_name: str = ""
    author_last_name: str = ""
    author_email: str = ""
    author_avatar: str = ""
    is_optimistic: bool = False

    @property
    def identity(self) -> str:
        """Identity used for persistence: record id when known, else local id."""
        return self.record_id or self.id

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the host wire shape (camelCase keys)."""
        data: dict[str, Any] = {key: getattr(self, attr) for attr, key in _TASK_KEYS.items()}
        data["isOptimistic"] = self.is_optimistic
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Task:
        """Deserialize from the host wire shape.

        Unknown keys are ignored, missing text fields default to "".
        """
        values: dict[str, Any] = {}
        for attr, key in _TASK_KEYS.items():
            raw = data.get(key, data.get(attr))
            if raw is None:
                continue
            values[attr] = str(raw)
        values["id"] = str(data.get("id") or "")
        values["is_optimistic"] = bool(data.get("isOptimistic", data.get("is_optimistic", False)))
        return cls(**values)


@dataclass(frozen=True)
class ColumnDefinition:
    """Configured column: accepted status aliases in priority order."""

    id: str
    title: str
    status_values: tuple[str, ...] = ()
    color: str | None = None

    def accepts(self, status: str) -> bool:
        """Check whether a status matches one of the aliases, ignoring case."""
        folded = status.casefold()
        return any(alias.casefold() == folded for alias in self.status_values)

    @property
    def target_status(self) -> str:
        """Status written onto a task dropped into this column."""
        return self.status_values[0] if self.status_values else self.title


@dataclass
class Column:
    """View projection of a column: ordered task ids."""

    id: str
    title: str
    task_ids: list[str] = field(default_factory=list)
    status_values: tuple[str, ...] = ()
    color: str | None = None

    @classmethod
    def from_definition(cls, definition: ColumnDefinition) -> Column:
        """Create an empty column for a definition."""
        return cls(
            id=definition.id,
            title=definition.title,
            task_ids=[],
            status_values=definition.status_values,
            color=definition.color,
        )

    @property
    def target_status(self) -> str:
        """Status written onto a task dropped into this column."""
        return self.status_values[0] if self.status_values else self.title

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the host wire shape."""
        data: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "taskIds": list(self.task_ids),
            "statusValues": list(self.status_values),
        }
        if self.color is not None:
            data["color"] = self.color
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Column:
        """Deserialize from the host wire shape."""
        task_ids = data.get("taskIds", data.get("task_ids")) or []
        status_values = data.get("statusValues", data.get("status_values")) or []
        return cls(
            id=str(data.get("id", "")),
            title=str(data.get("title", "")),
            task_ids=[str(task_id) for task_id in task_ids],
            status_values=tuple(str(value) for value in status_values),
            color=data.get("color"),
        )


@dataclass
class BoardData:
    """Tasks, columns and column display order."""

    tasks: dict[str, Task] = field(default_factory=dict)
    columns: dict[str, Column] = field(default_factory=dict)
    column_order: list[str] = field(default_factory=list)

    def ordered_columns(self) -> list[Column]:
        """Columns in display order."""
        return [self.columns[column_id] for column_id in self.column_order]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to `{tasks, columns, columnOrder}`."""
        return {
            "tasks": {task_id: task.to_dict() for task_id, task in self.tasks.items()},
            "columns": {column_id: column.to_dict() for column_id, column in self.columns.items()},
            "columnOrder": list(self.column_order),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BoardData:
        """Deserialize from `{tasks, columns, columnOrder}`.

        Map keys win over any `id` embedded in an entry. Other invariants are
        not enforced here; see `normalize_board`.
        """
        tasks = {
            str(task_id): Task.from_dict({**raw, "id": task_id})
            for task_id, raw in (data.get("tasks") or {}).items()
        }
        columns = {
            str(column_id): Column.from_dict({**raw, "id": column_id})
            for column_id, raw in (data.get("columns") or {}).items()
        }
        column_order = [str(column_id) for column_id in data.get("columnOrder") or []]
        return cls(tasks=tasks, columns=columns, column_order=column_order)
