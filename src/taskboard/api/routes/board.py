"""Board endpoints: current state, refresh and host outputs."""

from fastapi import APIRouter

from taskboard.api.dependencies import BoardRegistryDep, RecordStoreDep
from taskboard.api.models import (
    APIResponse,
    BoardOutputsResponse,
    BoardResponse,
    LegacyBundleRequest,
    board_to_response,
)
from taskboard.controller import BoardController
from taskboard.loader import Snapshot

router = APIRouter(prefix="/boards/{board_id}", tags=["board"])


def _respond(board_id: str, controller: BoardController) -> APIResponse[BoardResponse]:
    source = controller.last_source.value if controller.last_source is not None else None
    return APIResponse(data=board_to_response(board_id, controller.board, source))


@router.get("", response_model=APIResponse[BoardResponse])
def get_board(board_id: str, registry: BoardRegistryDep) -> APIResponse[BoardResponse]:
    """Get the board as last loaded or moved."""
    return _respond(board_id, registry.get(board_id))


@router.post("/refresh", response_model=APIResponse[BoardResponse])
def refresh_board(
    board_id: str, registry: BoardRegistryDep, store: RecordStoreDep
) -> APIResponse[BoardResponse]:
    """Reload the board from the record store, keeping unconfirmed moves."""
    controller = registry.get(board_id)
    controller.refresh(store.snapshot(board_id))
    return _respond(board_id, controller)


@router.post("/legacy", response_model=APIResponse[BoardResponse])
def load_legacy_bundle(
    board_id: str, body: LegacyBundleRequest, registry: BoardRegistryDep
) -> APIResponse[BoardResponse]:
    """Load the board from a raw legacy bundle.

    A malformed bundle leaves the board unchanged.
    """
    controller = registry.get(board_id)
    controller.refresh(Snapshot(legacy_raw=body.raw))
    return _respond(board_id, controller)


@router.get("/outputs", response_model=APIResponse[BoardOutputsResponse])
def get_outputs(board_id: str, registry: BoardRegistryDep) -> APIResponse[BoardOutputsResponse]:
    """Get the serialized board and last move for the host."""
    outputs = registry.get(board_id).get_outputs()
    return APIResponse(data=BoardOutputsResponse.model_validate(outputs))
