"""FastAPI dependencies for dependency injection."""

from __future__ import annotations

from collections.abc import Generator  # noqa: TC003
from typing import TYPE_CHECKING, Annotated

from fastapi import Depends

from taskboard.api.registry import BoardRegistry
from taskboard.events import EventManager
from taskboard.record_store import RecordStore

if TYPE_CHECKING:
    from taskboard.config import BoardConfig

# Global RecordStore instance (initialized on app startup)
_record_store: RecordStore | None = None


def init_record_store(db_path: str = "taskboard.db") -> RecordStore:
    """Initialize the global RecordStore instance."""
    global _record_store  # noqa: PLW0603
    _record_store = RecordStore(db_path)
    return _record_store


def close_record_store() -> None:
    """Close the global RecordStore instance."""
    global _record_store  # noqa: PLW0603
    if _record_store is not None:
        _record_store.close()
        _record_store = None


def get_record_store() -> Generator[RecordStore, None, None]:
    """Dependency that provides the RecordStore instance."""
    if _record_store is None:
        raise RuntimeError("RecordStore not initialized. Call init_record_store() first.")
    yield _record_store


# Type alias for dependency injection
RecordStoreDep = Annotated[RecordStore, Depends(get_record_store)]

# Global EventManager instance
_event_manager: EventManager | None = None


def init_event_manager() -> EventManager:
    """Initialize the global EventManager instance."""
    global _event_manager  # noqa: PLW0603
    _event_manager = EventManager()
    return _event_manager


def get_event_manager() -> Generator[EventManager, None, None]:
    """Dependency that provides the EventManager instance."""
    if _event_manager is None:
        raise RuntimeError("EventManager not initialized. Call init_event_manager() first.")
    yield _event_manager


# Type alias for dependency injection
EventManagerDep = Annotated[EventManager, Depends(get_event_manager)]

# Global BoardRegistry instance (initialized on app startup)
_registry: BoardRegistry | None = None


def init_board_registry(config: BoardConfig, event_manager: EventManager) -> BoardRegistry:
    """Initialize the global BoardRegistry instance."""
    global _registry  # noqa: PLW0603
    _registry = BoardRegistry(config, event_manager)
    return _registry


def close_board_registry() -> None:
    """Drop the global BoardRegistry instance."""
    global _registry  # noqa: PLW0603
    _registry = None


def get_board_registry() -> Generator[BoardRegistry, None, None]:
    """Dependency that provides the BoardRegistry instance."""
    if _registry is None:
        raise RuntimeError("BoardRegistry not initialized. Call init_board_registry() first.")
    yield _registry


# Type alias for dependency injection
BoardRegistryDep = Annotated[BoardRegistry, Depends(get_board_registry)]
