"""Unit tests for EventManager and events."""

import asyncio
import json
from datetime import UTC, datetime

import pytest

from taskboard.events import Event, EventManager, EventType
from taskboard.moves import TaskMoved


@pytest.fixture
def event_manager():
    """Create an EventManager instance."""
    return EventManager()


def change() -> TaskMoved:
    return TaskMoved(
        task_identity="rec-1",
        new_status="Done",
        previous_status="To Do",
        title="Write docs",
        timestamp=datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC),
    )


@pytest.mark.unit
class TestSubscriptions:
    """Tests for subscribe and unsubscribe."""

    def test_subscribe_with_board_filter(self, event_manager: EventManager) -> None:
        subscriber = event_manager.subscribe(board_id="b1")

        assert subscriber.board_id == "b1"
        assert event_manager.subscriber_count == 1

    def test_unsubscribe(self, event_manager: EventManager) -> None:
        subscriber = event_manager.subscribe()

        event_manager.unsubscribe(subscriber.id)
        event_manager.unsubscribe("nonexistent-id")

        assert event_manager.subscriber_count == 0


@pytest.mark.unit
class TestEmit:
    """Tests for event fan-out."""

    @pytest.mark.asyncio
    async def test_filter_by_board(self, event_manager: EventManager) -> None:
        """Filtered subscribers only see their board's events."""
        sub_all = event_manager.subscribe()
        sub_b1 = event_manager.subscribe(board_id="b1")

        await event_manager.emit(Event(EventType.BOARD_LOADED, {"n": 1}, board_id="b1"))
        await event_manager.emit(Event(EventType.BOARD_LOADED, {"n": 2}, board_id="b2"))

        first = await asyncio.wait_for(sub_all.queue.get(), timeout=1.0)
        second = await asyncio.wait_for(sub_all.queue.get(), timeout=1.0)
        assert [first.data["n"], second.data["n"]] == [1, 2]

        received = await asyncio.wait_for(sub_b1.queue.get(), timeout=1.0)
        assert received.data["n"] == 1
        assert sub_b1.queue.empty()

    def test_emit_without_subscribers(self, event_manager: EventManager) -> None:
        event_manager.emit_sync(Event(EventType.HEARTBEAT, {}))

    def test_emit_task_moved(self, event_manager: EventManager) -> None:
        sub = event_manager.subscribe()

        event_manager.emit_task_moved("b1", change())

        event = sub.queue.get_nowait()
        assert event.event_type == EventType.TASK_MOVED
        assert event.board_id == "b1"
        assert event.data["taskIdentity"] == "rec-1"
        assert event.data["timestamp"] == "2024-01-02T03:04:05Z"

    def test_emit_board_loaded(self, event_manager: EventManager) -> None:
        sub = event_manager.subscribe(board_id="b1")

        event_manager.emit_board_loaded("b1", "records", 3)

        event = sub.queue.get_nowait()
        assert event.data == {"board_id": "b1", "source": "records", "task_count": 3}

    @pytest.mark.asyncio
    async def test_emit_from_worker_thread(self, event_manager: EventManager) -> None:
        """Events emitted on a worker thread are handed to the subscriber's loop."""
        sub = event_manager.subscribe(board_id="b1")
        assert sub.loop is asyncio.get_running_loop()

        await asyncio.to_thread(event_manager.emit_board_loaded, "b1", "records", 2)

        event = await asyncio.wait_for(sub.queue.get(), timeout=1.0)
        assert event.data["task_count"] == 2
        assert sub.queue.empty()


@pytest.mark.unit
class TestEventFormat:
    """Tests for SSE formatting."""

    def test_to_sse(self) -> None:
        event = Event(EventType.TASK_MOVED, change().to_dict(), board_id="b1")

        lines = event.to_sse().split("\n")

        assert lines[0] == "event: task_moved"
        assert json.loads(lines[1].removeprefix("data: "))["newStatus"] == "Done"
        assert event.to_sse().endswith("\n\n")

    def test_heartbeat_goes_to_everyone(self, event_manager: EventManager) -> None:
        heartbeat = event_manager.create_heartbeat_event()

        assert heartbeat.event_type == EventType.HEARTBEAT
        assert heartbeat.board_id is None
        assert heartbeat.data["timestamp"].endswith("Z")


@pytest.mark.unit
class TestSseStream:
    """Tests for EventManager.sse_stream."""

    @pytest.mark.asyncio
    async def test_heartbeat_then_event(self) -> None:
        event_manager = EventManager(heartbeat_interval=0.01)
        subscriber = event_manager.subscribe(board_id="b1")
        stream = event_manager.sse_stream(subscriber)

        first = await anext(stream)
        event_manager.emit_board_loaded("b1", "samples", 6)
        second = await anext(stream)
        await stream.aclose()

        assert first.startswith("event: heartbeat\n")
        assert second.startswith("event: board_loaded\n")
        assert event_manager.subscriber_count == 0

    def test_broadcast_reaches_filtered_subscriber(self, event_manager: EventManager) -> None:
        """Events without a board id go to every subscriber."""
        subscriber = event_manager.subscribe(board_id="b1")

        event_manager.emit_sync(Event(EventType.HEARTBEAT, {}))

        assert subscriber.queue.qsize() == 1
