"""Data models for task moves."""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime  # noqa: TC003 - used at runtime in dataclass
from typing import Any


@dataclass(frozen=True)
class TaskMoved:
    """Change notification for a completed move.

    Attributes:
        task_identity: External-store identity when known, else the local id.
        new_status: Status written onto the task.
        previous_status: Title of the column the task left.
        title: Task title.
        timestamp: When the move happened (UTC).
    """

    task_identity: str
    new_status: str
    previous_status: str
    title: str
    timestamp: datetime

    def to_dict(self) -> dict[str, Any]:
        """Serialize for the host."""
        return {
            "taskIdentity": self.task_identity,
            "newStatus": self.new_status,
            "previousStatus": self.previous_status,
            "title": self.title,
            "timestamp": self.timestamp.isoformat().replace("+00:00", "Z"),
        }

    def to_json(self) -> str:
        """Serialize for the host as JSON text."""
        return json.dumps(self.to_dict())
