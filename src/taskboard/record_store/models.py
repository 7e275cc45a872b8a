"""SQLAlchemy models for the record store."""

from __future__ import annotations

import uuid
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import DateTime, String, Text, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from taskboard.loader import SnapshotRecord


def _utcnow() -> datetime:
    return datetime.now(UTC)


def generate_uuid() -> str:
    """Generate a new UUID string."""
    return str(uuid.uuid4())


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class TaskRecord(Base):
    """Authoritative task record owned by the host."""

    __tablename__ = "task_records"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    board_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    status: Mapped[str] = mapped_column(String(255), nullable=False)
    priority: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    assigned_to: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    due_date: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    author_first_name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    author_last_name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    author_email: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    # Snapshot order; needs sub-second resolution
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now(), onupdate=func.now()
    )

    def __init__(
        self,
        board_id: str,
        title: str,
        status: str,
        id: str | None = None,
        **kwargs: Any,
    ) -> None:
        kwargs.setdefault("priority", "")
        kwargs.setdefault("assigned_to", "")
        kwargs.setdefault("due_date", "")
        kwargs.setdefault("description", "")
        kwargs.setdefault("author_first_name", "")
        kwargs.setdefault("author_last_name", "")
        kwargs.setdefault("author_email", "")
        super().__init__(**kwargs)
        self.id = id if id is not None else generate_uuid()
        self.board_id = board_id
        self.title = title
        self.status = status

    def to_snapshot_record(self) -> SnapshotRecord:
        """Expose the record under the field aliases the loader reads."""
        return SnapshotRecord(
            record_id=self.id,
            fields={
                "id": self.id,
                "title": self.title,
                "status": self.status,
                "priority": self.priority,
                "assignedto": self.assigned_to,
                "duedate": self.due_date,
                "description": self.description,
                "authorfirstname": self.author_first_name,
                "authorlastname": self.author_last_name,
                "authoremail": self.author_email,
            },
        )

    def __repr__(self) -> str:
        return f"<TaskRecord(id={self.id!r}, title={self.title!r}, status={self.status!r})>"
