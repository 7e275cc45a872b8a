"""Demo tasks shown when no real data is available."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from taskboard.board import Task, assign_task, build_board

if TYPE_CHECKING:
    from collections.abc import Sequence

    from taskboard.board import BoardData, ColumnDefinition

SAMPLE_TASKS: tuple[Task, ...] = (
    Task(
        id="task-1",
        title="Implement new API endpoints",
        status="Todo",
        priority="high",
        due_date="Today",
        assigned_to="john.smith@company.com",
        author_first_name="John",
        author_last_name="Smith",
        author_email="john.smith@company.com",
        description=(
            "Design and implement RESTful API endpoints for the new user management "
            "module with authentication, validation and error handling."
        ),
    ),
    Task(
        id="task-2",
        title="Fix user interface bug",
        status="In Progress",
        priority="medium",
        due_date="Tomorrow",
        assigned_to="mary.johnson@company.com",
        author_first_name="Mary",
        author_last_name="Johnson",
        author_email="mary.johnson@company.com",
        description=(
            "Navigation bar overlaps the content area on mobile devices. "
            "Fix the media queries and verify across screen sizes."
        ),
    ),
    Task(
        id="task-3",
        title="Update documentation",
        status="Review",
        priority="low",
        due_date="Next week",
        assigned_to="sarah.wilson@company.com",
        author_first_name="Sarah",
        author_last_name="Wilson",
        author_email="sarah.wilson@company.com",
        description="Refresh the README and developer guides; remove deprecated API references.",
    ),
    Task(
        id="task-4",
        title="Test new features",
        status="Done",
        priority="high",
        due_date="Yesterday",
        assigned_to="mike.davis@company.com",
        author_first_name="Mike",
        author_last_name="Davis",
        author_email="mike.davis@company.com",
        description="Run the payment gateway regression suite and file any defects found.",
    ),
    Task(
        id="task-5",
        title="Prepare client presentation",
        status="Todo",
        priority="medium",
        due_date="Friday",
        assigned_to="anna.brown@company.com",
        author_first_name="Anna",
        author_last_name="Brown",
        author_email="anna.brown@company.com",
        description="Slide deck for the Q3 progress review: milestones, budget and risks.",
    ),
    Task(
        id="task-6",
        title="Code review and merge requests",
        status="In Progress",
        priority="low",
        due_date="Monday",
        assigned_to="david.taylor@company.com",
        author_first_name="David",
        author_last_name="Taylor",
        author_email="david.taylor@company.com",
    ),
)


def sample_board(definitions: Sequence[ColumnDefinition]) -> BoardData:
    """Build a board holding copies of the demo tasks."""
    board = build_board(definitions)
    for task in SAMPLE_TASKS:
        assign_task(replace(task), board, definitions)
    return board
