"""Task record endpoints (the host's authoritative store)."""

from fastapi import APIRouter, status

from taskboard.api.dependencies import RecordStoreDep
from taskboard.api.models import (
    APIResponse,
    RecordCreate,
    RecordResponse,
    record_to_response,
)
from taskboard.record_store import RecordNotFoundError

router = APIRouter(prefix="/boards/{board_id}/records", tags=["records"])


@router.post(
    "",
    response_model=APIResponse[RecordResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_record(
    board_id: str, body: RecordCreate, store: RecordStoreDep
) -> APIResponse[RecordResponse]:
    """Create a task record on a board."""
    record = store.create_record(board_id=board_id, **body.model_dump())
    return APIResponse(data=record_to_response(record))


@router.get("", response_model=APIResponse[list[RecordResponse]])
def list_records(board_id: str, store: RecordStoreDep) -> APIResponse[list[RecordResponse]]:
    """List a board's task records in creation order."""
    records = store.list_records(board_id)
    return APIResponse(data=[record_to_response(r) for r in records])


@router.get("/{record_id}", response_model=APIResponse[RecordResponse])
def get_record(board_id: str, record_id: str, store: RecordStoreDep) -> APIResponse[RecordResponse]:
    """Get a single task record."""
    record = store.get_record(record_id)
    if record.board_id != board_id:
        raise RecordNotFoundError(f"Record '{record_id}' not on board {board_id}")
    return APIResponse(data=record_to_response(record))
