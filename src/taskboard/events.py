"""Board change notifications fanned out to host subscribers.

Producers (MoveEngine, BoardController) run synchronously and call the
`emit_*` helpers, which never block. Consumers hold a Subscriber queue and
usually read it through `EventManager.sse_stream`.
"""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import StrEnum
from typing import TYPE_CHECKING, Any
from uuid import uuid4

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from taskboard.moves import TaskMoved

logger = logging.getLogger(__name__)

HEARTBEAT_INTERVAL = 30.0  # seconds


def _running_loop() -> asyncio.AbstractEventLoop | None:
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        return None


class EventType(StrEnum):
    """Kinds of board notifications."""

    TASK_MOVED = "task_moved"
    BOARD_LOADED = "board_loaded"
    HEARTBEAT = "heartbeat"


@dataclass
class Event:
    """One notification. `board_id` None addresses every subscriber."""

    event_type: EventType
    data: dict[str, Any]
    board_id: str | None = None

    def to_sse(self) -> str:
        """Encode as a Server-Sent Events frame."""
        return f"event: {self.event_type.value}\ndata: {json.dumps(self.data)}\n\n"


@dataclass
class Subscriber:
    """A consumer with its own queue, optionally bound to one board."""

    id: str
    queue: asyncio.Queue[Event]
    board_id: str | None = None
    loop: asyncio.AbstractEventLoop | None = None  # loop the consumer reads on

    @classmethod
    def create(cls, board_id: str | None = None) -> Subscriber:
        return cls(
            id=str(uuid4()),
            queue=asyncio.Queue(),
            board_id=board_id,
            loop=_running_loop(),
        )

    def deliver(self, event: Event) -> None:
        """Enqueue without blocking, from the consumer's loop or any other thread.

        asyncio.Queue is not thread-safe, so producers off the consumer's
        loop hand the put over to that loop.
        """
        if self.loop is None or self.loop.is_closed() or self.loop is _running_loop():
            self.queue.put_nowait(event)
        else:
            self.loop.call_soon_threadsafe(self.queue.put_nowait, event)

    def wants(self, event: Event) -> bool:
        """Whether the event is addressed to this subscriber."""
        return self.board_id is None or event.board_id is None or self.board_id == event.board_id


class EventManager:
    """Registry of subscribers plus typed emit helpers."""

    def __init__(self, heartbeat_interval: float = HEARTBEAT_INTERVAL) -> None:
        self.heartbeat_interval = heartbeat_interval
        self._subscribers: dict[str, Subscriber] = {}

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def subscribe(self, board_id: str | None = None) -> Subscriber:
        """Register a consumer.

        Args:
            board_id: Only receive this board's events; None for all boards.
        """
        subscriber = Subscriber.create(board_id)
        self._subscribers[subscriber.id] = subscriber
        logger.debug("Subscriber %s joined (board=%s)", subscriber.id, board_id)
        return subscriber

    def unsubscribe(self, subscriber_id: str) -> None:
        """Drop a consumer. Unknown ids are ignored."""
        if self._subscribers.pop(subscriber_id, None) is not None:
            logger.debug("Subscriber %s left", subscriber_id)

    async def emit(self, event: Event) -> None:
        """Deliver an event from async code."""
        for subscriber in list(self._subscribers.values()):
            if subscriber.wants(event):
                await subscriber.queue.put(event)

    def emit_sync(self, event: Event) -> None:
        """Deliver an event from synchronous code."""
        for subscriber in list(self._subscribers.values()):
            if subscriber.wants(event):
                subscriber.deliver(event)

    def emit_task_moved(self, board_id: str, change: TaskMoved) -> None:
        self.emit_sync(Event(EventType.TASK_MOVED, change.to_dict(), board_id=board_id))

    def emit_board_loaded(self, board_id: str, source: str, task_count: int) -> None:
        data = {"board_id": board_id, "source": source, "task_count": task_count}
        self.emit_sync(Event(EventType.BOARD_LOADED, data, board_id=board_id))

    def create_heartbeat_event(self) -> Event:
        now = datetime.now(UTC).isoformat().replace("+00:00", "Z")
        return Event(EventType.HEARTBEAT, {"timestamp": now})

    async def sse_stream(self, subscriber: Subscriber) -> AsyncIterator[str]:
        """Yield SSE frames for a subscriber until the client goes away.

        A heartbeat frame is produced whenever the queue stays empty for
        `heartbeat_interval` seconds. The subscriber is removed on exit.
        """
        try:
            while True:
                try:
                    event = await asyncio.wait_for(
                        subscriber.queue.get(), timeout=self.heartbeat_interval
                    )
                except TimeoutError:
                    event = self.create_heartbeat_event()
                yield event.to_sse()
        finally:
            self.unsubscribe(subscriber.id)
