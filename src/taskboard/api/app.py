"""FastAPI application setup."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from taskboard import __version__
from taskboard.api.dependencies import (
    close_board_registry,
    close_record_store,
    init_board_registry,
    init_event_manager,
    init_record_store,
)
from taskboard.api.models import APIResponse
from taskboard.api.routes import board, drag, events, records
from taskboard.board import ColumnNotFoundError, TaskNotFoundError
from taskboard.config import load_config
from taskboard.record_store import RecordNotFoundError, RecordStoreError

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from taskboard.config import BoardConfig


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    config: BoardConfig = app.state.config or load_config()
    db_path = app.state.db_path or config.database

    init_record_store(db_path)
    event_manager = init_event_manager()
    init_board_registry(config, event_manager)

    yield

    close_board_registry()
    close_record_store()


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=APIResponse[None](data=None, error=message).model_dump(),
    )


def create_app(config: BoardConfig | None = None, db_path: str | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Board configuration; loaded from taskboard.yaml at startup when None.
        db_path: Record store path; overrides the configured database.
    """
    app = FastAPI(
        title="Taskboard API",
        description="Host service for the Taskboard board engine",
        version=__version__,
        lifespan=lifespan,
    )

    # Store config for lifespan manager
    app.state.config = config
    app.state.db_path = db_path

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RecordNotFoundError)
    async def record_not_found_handler(
        _request: Request, _exc: RecordNotFoundError
    ) -> JSONResponse:
        return _error(status.HTTP_404_NOT_FOUND, "Record not found")

    @app.exception_handler(TaskNotFoundError)
    async def task_not_found_handler(_request: Request, exc: TaskNotFoundError) -> JSONResponse:
        return _error(status.HTTP_404_NOT_FOUND, str(exc))

    @app.exception_handler(ColumnNotFoundError)
    async def column_not_found_handler(
        _request: Request, exc: ColumnNotFoundError
    ) -> JSONResponse:
        return _error(status.HTTP_404_NOT_FOUND, str(exc))

    @app.exception_handler(RecordStoreError)
    async def record_store_error_handler(
        _request: Request, _exc: RecordStoreError
    ) -> JSONResponse:
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    app.include_router(records.router, prefix="/api/v1")
    app.include_router(board.router, prefix="/api/v1")
    app.include_router(drag.router, prefix="/api/v1")
    app.include_router(events.router, prefix="/api/v1")

    return app


# Default app instance
app = create_app()
