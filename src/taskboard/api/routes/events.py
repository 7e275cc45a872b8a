"""Server-Sent Events (SSE) endpoint for board changes."""

from fastapi import APIRouter, Query
from fastapi.responses import StreamingResponse

from taskboard.api.dependencies import EventManagerDep

router = APIRouter(prefix="/events", tags=["events"])

# Proxies such as nginx must not buffer the stream
_SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "X-Accel-Buffering": "no",
}


@router.get("/stream")
async def event_stream(
    event_manager: EventManagerDep,
    board_id: str | None = Query(default=None, description="Only this board's events"),
) -> StreamingResponse:
    """Stream task_moved and board_loaded events, with periodic heartbeats."""
    subscriber = event_manager.subscribe(board_id)
    return StreamingResponse(
        event_manager.sse_stream(subscriber),
        media_type="text/event-stream",
        headers=_SSE_HEADERS,
    )
