"""Unit tests for RecordStore."""

import pytest

from taskboard.board import build_board
from taskboard.loader import BoardLoader, LoadSource, task_from_record
from taskboard.record_store import RecordNotFoundError, RecordStore


@pytest.fixture
def store():
    """Create an in-memory RecordStore."""
    s = RecordStore(":memory:")
    yield s
    s.close()


@pytest.mark.unit
class TestCreateRecord:
    """Tests for RecordStore.create_record."""

    def test_create_record(self, store: RecordStore) -> None:
        record = store.create_record("b1", "Write docs", "Todo", priority="high")

        assert record.id
        assert record.board_id == "b1"
        assert record.priority == "high"
        assert record.assigned_to == ""
        assert record.created_at is not None
        assert record.updated_at is not None

    def test_get_record(self, store: RecordStore) -> None:
        created = store.create_record("b1", "Write docs", "Todo")

        assert store.get_record(created.id).title == "Write docs"

    def test_get_missing_record(self, store: RecordStore) -> None:
        with pytest.raises(RecordNotFoundError):
            store.get_record("missing")


@pytest.mark.unit
class TestListRecords:
    """Tests for RecordStore.list_records and snapshot."""

    def test_scoped_to_board_in_creation_order(self, store: RecordStore) -> None:
        first = store.create_record("b1", "One", "Todo")
        store.create_record("b2", "Elsewhere", "Todo")
        second = store.create_record("b1", "Two", "Done")

        assert [r.id for r in store.list_records("b1")] == [first.id, second.id]

    def test_snapshot_feeds_loader(self, store: RecordStore, definitions) -> None:
        """Snapshot records read back as tasks keyed by record id."""
        record = store.create_record("b1", "One", "Active", assigned_to="a@b.c")

        snapshot = store.snapshot("b1")
        task = task_from_record(snapshot.records[0])
        result = BoardLoader(definitions).load(snapshot, build_board(definitions))

        assert snapshot.loading is False
        assert task is not None
        assert task.id == record.id
        assert task.record_id == record.id
        assert task.assigned_to == "a@b.c"
        assert result.source == LoadSource.RECORDS
        assert result.board.columns["inprogress"].task_ids == [record.id]

    def test_empty_board_snapshot(self, store: RecordStore) -> None:
        assert store.snapshot("nothing").records == []


@pytest.mark.unit
class TestApplyStatusChange:
    """Tests for RecordStore.apply_status_change."""

    def test_updates_status(self, store: RecordStore) -> None:
        record = store.create_record("b1", "One", "Todo")

        updated = store.apply_status_change(record.id, "Done")

        assert updated.status == "Done"
        assert store.get_record(record.id).status == "Done"

    def test_missing_record(self, store: RecordStore) -> None:
        with pytest.raises(RecordNotFoundError):
            store.apply_status_change("missing", "Done")
