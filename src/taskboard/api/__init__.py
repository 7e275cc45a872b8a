"""REST API host service for Taskboard."""

from taskboard.api.app import app, create_app
from taskboard.api.models import (
    APIResponse,
    BoardResponse,
    RecordCreate,
    RecordResponse,
)

__all__ = [
    "APIResponse",
    "BoardResponse",
    "RecordCreate",
    "RecordResponse",
    "app",
    "create_app",
]
