"""Shared pytest fixtures and configuration."""

import pytest

from taskboard.board import (
    DEFAULT_COLUMN_DEFINITIONS,
    BoardData,
    ColumnDefinition,
    Task,
    assign_task,
    build_board,
)


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


# Shared fixtures


@pytest.fixture
def definitions() -> tuple[ColumnDefinition, ...]:
    """The default four-column layout."""
    return DEFAULT_COLUMN_DEFINITIONS


@pytest.fixture
def board(definitions: tuple[ColumnDefinition, ...]) -> BoardData:
    """A board with two tasks in To Do and one in Done."""
    b = build_board(definitions)
    for task in (
        Task(id="t1", title="Write docs", status="Todo", record_id="rec-1"),
        Task(id="t2", title="Fix bug", status="New"),
        Task(id="t3", title="Ship it", status="Closed", record_id="rec-3"),
    ):
        assign_task(task, b, definitions)
    return b
