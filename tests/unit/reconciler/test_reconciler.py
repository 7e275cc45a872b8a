"""Unit tests for optimistic reconciliation."""

import pytest

from taskboard.board import BoardData, Task, build_board, validate_board
from taskboard.reconciler import OptimisticReconciler, reconcile_task


@pytest.mark.unit
class TestReconcileTask:
    """Tests for reconcile_task."""

    def test_no_previous_version(self) -> None:
        """A new task is taken as read."""
        incoming = Task(id="t1", status="Todo")
        assert reconcile_task(None, incoming) is incoming

    def test_previous_not_optimistic(self) -> None:
        """Confirmed tasks always follow the snapshot."""
        previous = Task(id="t1", status="Done")
        incoming = Task(id="t1", status="Todo")

        assert reconcile_task(previous, incoming) is incoming

    def test_stale_snapshot_keeps_local_status(self) -> None:
        """An optimistic task survives a snapshot that has not caught up."""
        previous = Task(id="t1", title="Old", status="Done", is_optimistic=True)
        incoming = Task(id="t1", title="New title", status="Todo")

        result = reconcile_task(previous, incoming)

        assert result.status == "Done"
        assert result.is_optimistic is True
        assert result.title == "New title"

    def test_converged_snapshot_clears_flag(self) -> None:
        previous = Task(id="t1", status="Done", is_optimistic=True)
        incoming = Task(id="t1", status="Done", priority="high")

        result = reconcile_task(previous, incoming)

        assert result.is_optimistic is False
        assert result.priority == "high"

    def test_status_compare_is_case_sensitive(self) -> None:
        """A snapshot differing only in case is still stale."""
        previous = Task(id="t1", status="Done", is_optimistic=True)
        incoming = Task(id="t1", status="done")

        result = reconcile_task(previous, incoming)

        assert result.status == "Done"
        assert result.is_optimistic is True

    def test_inputs_untouched(self) -> None:
        previous = Task(id="t1", status="Done", is_optimistic=True)
        incoming = Task(id="t1", status="Todo")

        reconcile_task(previous, incoming)

        assert previous == Task(id="t1", status="Done", is_optimistic=True)
        assert incoming == Task(id="t1", status="Todo")


@pytest.mark.unit
class TestOptimisticReconciler:
    """Tests for OptimisticReconciler.rebuild."""

    @pytest.fixture
    def reconciler(self, definitions) -> OptimisticReconciler:
        return OptimisticReconciler(definitions)

    def test_stale_task_stays_in_moved_column(
        self, reconciler: OptimisticReconciler, definitions
    ) -> None:
        """A moved task is not yanked back by a stale refresh."""
        previous = build_board(definitions)
        previous.tasks["t1"] = Task(id="t1", status="Done", is_optimistic=True)
        previous.columns["done"].task_ids.append("t1")

        board = reconciler.rebuild(previous, [Task(id="t1", status="Todo")])

        assert board.columns["done"].task_ids == ["t1"]
        assert board.columns["todo"].task_ids == []
        assert board.tasks["t1"].is_optimistic is True
        assert reconciler.last_stats.stale == 1
        assert reconciler.last_stats.converged == 0

    def test_converged_task(self, reconciler: OptimisticReconciler, definitions) -> None:
        previous = build_board(definitions)
        previous.tasks["t1"] = Task(id="t1", status="Done", is_optimistic=True)
        previous.columns["done"].task_ids.append("t1")

        board = reconciler.rebuild(previous, [Task(id="t1", status="Done")])

        assert board.tasks["t1"].is_optimistic is False
        assert reconciler.last_stats.converged == 1

    def test_missing_tasks_are_dropped(
        self, reconciler: OptimisticReconciler, board: BoardData
    ) -> None:
        """Only tasks in the snapshot make it onto the new board."""
        rebuilt = reconciler.rebuild(board, [Task(id="t2", status="New")])

        assert list(rebuilt.tasks) == ["t2"]
        assert rebuilt.columns["done"].task_ids == []
        assert validate_board(rebuilt) == []

    def test_previous_board_untouched(
        self, reconciler: OptimisticReconciler, board: BoardData
    ) -> None:
        before = BoardData.from_dict(board.to_dict())

        rebuilt = reconciler.rebuild(board, [Task(id="t9", status="Active")])

        assert rebuilt is not board
        assert board == before

    def test_rebuild_is_idempotent(self, reconciler: OptimisticReconciler, definitions) -> None:
        """The same snapshot twice gives the same board."""
        snapshot = [
            Task(id="a", status="Todo"),
            Task(id="b", status="Working"),
            Task(id="c", status="Blocked"),
        ]
        empty = build_board(definitions)

        first = reconciler.rebuild(empty, snapshot)
        second = reconciler.rebuild(first, snapshot)

        assert first == second
        assert first.columns["todo"].task_ids == ["a", "c"]
        assert reconciler.last_stats.total == 3
