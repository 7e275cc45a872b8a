"""Integration tests for the host service: records, refresh, drag and persistence."""

import json
import tempfile
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from taskboard.api import dependencies
from taskboard.api.app import create_app
from taskboard.config import BoardConfig
from taskboard.events import EventType


@pytest.fixture
def temp_db_path() -> str:
    """Create a temporary database path."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        return f.name


@pytest.fixture
def client(temp_db_path: str):
    """Create a test client with a temporary database."""
    app = create_app(config=BoardConfig(), db_path=temp_db_path)
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client
    # Cleanup
    Path(temp_db_path).unlink(missing_ok=True)
    Path(f"{temp_db_path}-wal").unlink(missing_ok=True)
    Path(f"{temp_db_path}-shm").unlink(missing_ok=True)


def create(client: TestClient, board_id: str, title: str, status: str) -> str:
    response = client.post(
        f"/api/v1/boards/{board_id}/records", json={"title": title, "status": status}
    )
    assert response.status_code == 201
    return response.json()["data"]["id"]


@pytest.mark.integration
class TestDragPersistFlow:
    """Create records -> refresh -> drag -> drop -> refresh."""

    def test_full_flow(self, client: TestClient) -> None:
        # 1. Seed the record store
        docs = create(client, "team", "Write docs", "Todo")
        bug = create(client, "team", "Fix bug", "active")

        # 2. Load the board
        board = client.post("/api/v1/boards/team/refresh").json()["data"]
        assert board["source"] == "records"
        assert board["columns"]["todo"]["task_ids"] == [docs]
        assert board["columns"]["inprogress"]["task_ids"] == [bug]

        # 3. Drag docs to Done
        start = client.post("/api/v1/boards/team/drag/start", json={"task_id": docs})
        assert start.status_code == 200
        drop = client.post("/api/v1/boards/team/drag/drop", json={"target_column_id": "done"})
        change = drop.json()["data"]["change"]
        assert change["task_identity"] == docs
        assert change["previous_status"] == "To Do"

        # 4. Board shows the move as unconfirmed
        board = client.get("/api/v1/boards/team").json()["data"]
        assert board["columns"]["done"]["task_ids"] == [docs]
        assert board["tasks"][docs]["is_optimistic"] is True

        # 5. Record store has the new status
        record = client.get(f"/api/v1/boards/team/records/{docs}").json()["data"]
        assert record["status"] == "Done"

        # 6. Next refresh confirms the move
        board = client.post("/api/v1/boards/team/refresh").json()["data"]
        assert board["columns"]["done"]["task_ids"] == [docs]
        assert board["tasks"][docs]["is_optimistic"] is False

    def test_outputs_after_move(self, client: TestClient) -> None:
        task = create(client, "team", "Review PR", "Review")
        client.post("/api/v1/boards/team/refresh")
        client.post("/api/v1/boards/team/drag/start", json={"task_id": task})
        client.post("/api/v1/boards/team/drag/drop", json={"target_column_id": "todo"})

        outputs = client.get("/api/v1/boards/team/outputs").json()["data"]

        last = json.loads(outputs["last_moved_task"])
        assert last["taskIdentity"] == task
        assert last["newStatus"] == "Todo"
        assert last["previousStatus"] == "Review"
        assert last["timestamp"].endswith("Z")
        board = json.loads(outputs["updated_tasks_data"])
        assert board["columns"]["todo"]["taskIds"] == [task]

    def test_events_emitted(self, client: TestClient) -> None:
        subscriber = dependencies._event_manager.subscribe(board_id="team")
        task = create(client, "team", "Deploy", "Todo")

        client.post("/api/v1/boards/team/refresh")
        client.post("/api/v1/boards/team/drag/start", json={"task_id": task})
        client.post("/api/v1/boards/team/drag/drop", json={"target_column_id": "review"})

        loaded = subscriber.queue.get_nowait()
        moved = subscriber.queue.get_nowait()
        assert loaded.event_type == EventType.BOARD_LOADED
        assert loaded.data["task_count"] == 1
        assert moved.event_type == EventType.TASK_MOVED
        assert moved.data["newStatus"] == "Review"


@pytest.mark.integration
class TestBoardsAreIsolated:
    """Boards share a record store but nothing else."""

    def test_records_and_drags_per_board(self, client: TestClient) -> None:
        a = create(client, "alpha", "A", "Todo")
        create(client, "beta", "B", "Done")

        alpha = client.post("/api/v1/boards/alpha/refresh").json()["data"]
        beta = client.post("/api/v1/boards/beta/refresh").json()["data"]
        assert list(alpha["tasks"]) == [a]
        assert len(beta["tasks"]) == 1

        client.post("/api/v1/boards/alpha/drag/start", json={"task_id": a})
        assert client.get("/api/v1/boards/beta/drag").json()["data"]["state"] == "idle"

        response = client.post("/api/v1/boards/beta/drag/start", json={"task_id": a})
        assert response.status_code == 404


@pytest.mark.integration
class TestCustomColumns:
    """Configured columns drive classification end to end."""

    def test_quick_setup_columns(self, temp_db_path: str) -> None:
        config = BoardConfig.from_dict({"quick_setup": "[Backlog, Shipped]"})
        app = create_app(config=config, db_path=temp_db_path)

        with TestClient(app, raise_server_exceptions=False) as client:
            task = create(client, "team", "Thing", "shipped")
            board = client.post("/api/v1/boards/team/refresh").json()["data"]

        assert board["column_order"] == ["col_0", "col_1"]
        assert board["columns"]["col_1"]["task_ids"] == [task]
