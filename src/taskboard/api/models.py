"""Pydantic models for REST API."""

from datetime import datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Standard API response wrapper."""

    data: T | None = None
    error: str | None = None


# Record models


class RecordCreate(BaseModel):
    """Request model for creating a task record."""

    title: str = Field(..., min_length=1, max_length=500)
    status: str = Field(..., min_length=1, max_length=255)
    priority: str = Field(default="", max_length=50)
    assigned_to: str = Field(default="", max_length=255)
    due_date: str = Field(default="", max_length=100)
    description: str = ""
    author_first_name: str = Field(default="", max_length=255)
    author_last_name: str = Field(default="", max_length=255)
    author_email: str = Field(default="", max_length=255)


class RecordResponse(BaseModel):
    """Response model for a task record."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    board_id: str
    title: str
    status: str
    priority: str
    assigned_to: str
    due_date: str
    description: str
    author_first_name: str
    author_last_name: str
    author_email: str
    created_at: datetime
    updated_at: datetime


def record_to_response(record: Any) -> RecordResponse:
    """Convert a TaskRecord model to RecordResponse."""
    return RecordResponse.model_validate(record)


# Board models


class TaskResponse(BaseModel):
    """Response model for a task on the board."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    status: str
    priority: str
    assigned_to: str
    due_date: str
    description: str
    record_id: str | None
    author_first_name: str
    author_last_name: str
    author_email: str
    author_avatar: str
    is_optimistic: bool


class ColumnResponse(BaseModel):
    """Response model for a board column."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    task_ids: list[str]
    status_values: list[str]
    color: str | None


class BoardResponse(BaseModel):
    """Response model for a whole board."""

    model_config = ConfigDict(from_attributes=True)

    board_id: str
    source: str | None
    tasks: dict[str, TaskResponse]
    columns: dict[str, ColumnResponse]
    column_order: list[str]


def board_to_response(board_id: str, board: Any, source: str | None) -> BoardResponse:
    """Convert BoardData to BoardResponse."""
    return BoardResponse(
        board_id=board_id,
        source=source,
        tasks={tid: TaskResponse.model_validate(task) for tid, task in board.tasks.items()},
        columns={
            cid: ColumnResponse.model_validate(column) for cid, column in board.columns.items()
        },
        column_order=list(board.column_order),
    )


class LegacyBundleRequest(BaseModel):
    """Request model carrying a raw legacy bundle."""

    raw: str


class BoardOutputsResponse(BaseModel):
    """Response model for serialized host outputs."""

    model_config = ConfigDict(from_attributes=True)

    updated_tasks_data: str
    last_moved_task: str


# Drag models


class DragStartRequest(BaseModel):
    """Request model for starting a drag."""

    task_id: str = Field(..., min_length=1)
    source_column_id: str | None = None


class DropRequest(BaseModel):
    """Request model for dropping onto a column."""

    target_column_id: str = Field(..., min_length=1)


class DragStateResponse(BaseModel):
    """Response model for the drag session."""

    state: str
    task_id: str | None
    source_column_id: str | None


def session_to_response(session: Any) -> DragStateResponse:
    """Convert a DragSession to DragStateResponse."""
    return DragStateResponse(
        state=session.state.value,
        task_id=session.task_id,
        source_column_id=session.source_column_id,
    )


class TaskMovedResponse(BaseModel):
    """Response model for a completed move."""

    model_config = ConfigDict(from_attributes=True)

    task_identity: str
    new_status: str
    previous_status: str
    title: str
    timestamp: datetime


class DropResponse(BaseModel):
    """Response model for a drop: the move, if one happened."""

    moved: bool
    change: TaskMovedResponse | None = None
