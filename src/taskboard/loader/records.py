"""Reading tasks out of host records."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from taskboard.board import Task

if TYPE_CHECKING:
    from taskboard.loader.models import Record

logger = logging.getLogger(__name__)

# Task attribute -> record field alias
FIELD_ALIASES = {
    "id": "id",
    "title": "title",
    "status": "status",
    "priority": "priority",
    "assigned_to": "assignedto",
    "due_date": "duedate",
    "description": "description",
    "author_first_name": "authorfirstname",
    "author_last_name": "authorlastname",
    "author_email": "authoremail",
    "author_avatar": "authoravatar",
}

DEFAULT_TITLE = "Untitled"
DEFAULT_STATUS = "Unknown"


def read_field(record: Record, alias: str) -> str:
    """Read one field from a record.

    A failing read yields "" for that field only.
    """
    try:
        value = record.get_formatted_value(alias)
    except Exception:  # noqa: BLE001 - host records may fail on any field
        logger.debug("Field %r unreadable on record %s", alias, record.record_id)
        return ""
    return "" if value is None else str(value)


def task_from_record(record: Record) -> Task | None:
    """Build a task from a record.

    Returns:
        The task, or None when the record has no usable identity.
    """
    values = {attr: read_field(record, alias) for attr, alias in FIELD_ALIASES.items()}
    record_id = str(record.record_id or "")

    task_id = values.pop("id") or record_id
    if not task_id:
        logger.warning("Skipping record without an id")
        return None

    values["title"] = values["title"] or DEFAULT_TITLE
    values["status"] = values["status"] or DEFAULT_STATUS
    return Task(id=task_id, record_id=record_id or None, **values)
