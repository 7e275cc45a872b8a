"""Drag endpoints: start, drop and cancel a gesture."""

import logging

from fastapi import APIRouter

from taskboard.api.dependencies import BoardRegistryDep, RecordStoreDep
from taskboard.api.models import (
    APIResponse,
    DragStartRequest,
    DragStateResponse,
    DropRequest,
    DropResponse,
    TaskMovedResponse,
    session_to_response,
)
from taskboard.record_store import RecordNotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/boards/{board_id}/drag", tags=["drag"])


@router.get("", response_model=APIResponse[DragStateResponse])
def get_drag_state(board_id: str, registry: BoardRegistryDep) -> APIResponse[DragStateResponse]:
    """Get the board's drag session."""
    return APIResponse(data=session_to_response(registry.get(board_id).session))


@router.post("/start", response_model=APIResponse[DragStateResponse])
def start_drag(
    board_id: str, body: DragStartRequest, registry: BoardRegistryDep
) -> APIResponse[DragStateResponse]:
    """Start dragging a task."""
    controller = registry.get(board_id)
    controller.begin_drag(body.task_id, body.source_column_id)
    return APIResponse(data=session_to_response(controller.session))


@router.post("/drop", response_model=APIResponse[DropResponse])
def drop(
    board_id: str, body: DropRequest, registry: BoardRegistryDep, store: RecordStoreDep
) -> APIResponse[DropResponse]:
    """Drop the dragged task onto a column and persist the new status."""
    change = registry.get(board_id).drop(body.target_column_id)
    if change is None:
        return APIResponse(data=DropResponse(moved=False))

    # Sample and legacy tasks have no backing record; the board keeps them optimistic.
    try:
        store.apply_status_change(change.task_identity, change.new_status)
    except RecordNotFoundError:
        logger.info("No record %s to persist, move stays local", change.task_identity)

    return APIResponse(
        data=DropResponse(moved=True, change=TaskMovedResponse.model_validate(change))
    )


@router.post("/cancel", response_model=APIResponse[DragStateResponse])
def cancel_drag(board_id: str, registry: BoardRegistryDep) -> APIResponse[DragStateResponse]:
    """Abort the drag without moving anything."""
    controller = registry.get(board_id)
    controller.cancel_drag()
    return APIResponse(data=session_to_response(controller.session))
