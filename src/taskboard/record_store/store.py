"""RecordStore - the host's authoritative task records."""

from __future__ import annotations

import logging

from sqlalchemy import select

from taskboard.loader import Snapshot, SnapshotRecord
from taskboard.record_store.database import Database
from taskboard.record_store.exceptions import RecordNotFoundError
from taskboard.record_store.models import TaskRecord

logger = logging.getLogger(__name__)


class RecordStore:
    """CRUD over task records plus snapshots for board refreshes."""

    def __init__(self, db_path: str = "taskboard.db") -> None:
        """Initialize the store, creating tables if needed.

        Args:
            db_path: Path to SQLite database file
        """
        self._db = Database(db_path)
        self._db.create_tables()

    def close(self) -> None:
        """Close the database connection."""
        self._db.close()

    def create_record(
        self,
        board_id: str,
        title: str,
        status: str,
        priority: str = "",
        assigned_to: str = "",
        due_date: str = "",
        description: str = "",
        author_first_name: str = "",
        author_last_name: str = "",
        author_email: str = "",
    ) -> TaskRecord:
        """Create a task record.

        Returns:
            Created TaskRecord with generated ID
        """
        record = TaskRecord(
            board_id=board_id,
            title=title,
            status=status,
            priority=priority,
            assigned_to=assigned_to,
            due_date=due_date,
            description=description,
            author_first_name=author_first_name,
            author_last_name=author_last_name,
            author_email=author_email,
        )
        with self._db.session() as session:
            session.add(record)
            session.flush()
            session.refresh(record)
        logger.info("Created record %s on board %s", record.id, board_id)
        return record

    def get_record(self, record_id: str) -> TaskRecord:
        """Get a record by ID.

        Raises:
            RecordNotFoundError: If record doesn't exist
        """
        with self._db.session() as session:
            record = session.get(TaskRecord, record_id)
            if record is None:
                raise RecordNotFoundError(f"Record with id '{record_id}' not found")
            return record

    def list_records(self, board_id: str) -> list[TaskRecord]:
        """List a board's records in creation order."""
        with self._db.session() as session:
            stmt = (
                select(TaskRecord)
                .where(TaskRecord.board_id == board_id)
                .order_by(TaskRecord.created_at, TaskRecord.id)
            )
            return list(session.execute(stmt).scalars().all())

    def snapshot(self, board_id: str) -> Snapshot:
        """Current records of a board as refresh input."""
        records: list[SnapshotRecord] = [r.to_snapshot_record() for r in self.list_records(board_id)]
        return Snapshot(records=records)

    def apply_status_change(self, record_id: str, new_status: str) -> TaskRecord:
        """Persist a new status for a record.

        Raises:
            RecordNotFoundError: If record doesn't exist
        """
        with self._db.session() as session:
            record = session.get(TaskRecord, record_id)
            if record is None:
                raise RecordNotFoundError(f"Record with id '{record_id}' not found")
            previous = record.status
            record.status = new_status
            session.flush()
            session.refresh(record)
        logger.info("Record %s status %r -> %r", record_id, previous, new_status)
        return record
