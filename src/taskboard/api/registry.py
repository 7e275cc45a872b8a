"""Per-board controllers for the host service."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from taskboard.controller import BoardController
from taskboard.loader import BoardLoader

if TYPE_CHECKING:
    from taskboard.config import BoardConfig
    from taskboard.events import EventManager

logger = logging.getLogger(__name__)


class BoardRegistry:
    """Creates one BoardController per board id on first use.

    Boards never share a drag session, so gestures on one board cannot
    affect another.
    """

    def __init__(self, config: BoardConfig, event_manager: EventManager) -> None:
        self.config = config
        self.event_manager = event_manager
        self._controllers: dict[str, BoardController] = {}

    def get(self, board_id: str) -> BoardController:
        """Get or create the controller for a board."""
        controller = self._controllers.get(board_id)
        if controller is None:
            logger.info("Creating board %s", board_id)
            controller = BoardController(
                definitions=self.config.columns,
                event_manager=self.event_manager,
                loader=BoardLoader(
                    self.config.columns,
                    use_fallback_data=self.config.use_fallback_data,
                ),
                board_id=board_id,
            )
            self._controllers[board_id] = controller
        return controller

    def __len__(self) -> int:
        return len(self._controllers)
