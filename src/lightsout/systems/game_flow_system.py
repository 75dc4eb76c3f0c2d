"""High-level coordinator for play/solved mode transitions."""
from __future__ import annotations

import logging

from esper import World

from lightsout.components.game_session import GameMode
from lightsout.events.bus import (
    EVENT_NEW_GAME_STARTED,
    EVENT_PUZZLE_SOLVED,
    EventBus,
)
from lightsout.utils.game_mode import get_session, set_game_mode

logger = logging.getLogger(__name__)


class GameFlowSystem:
    """Moves the session to SOLVED when a puzzle is finished and back on a new game."""

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_PUZZLE_SOLVED, self._on_puzzle_solved)
        self.event_bus.subscribe(EVENT_NEW_GAME_STARTED, self._on_new_game_started)

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def _on_puzzle_solved(self, sender, **payload) -> None:
        set_game_mode(self.world, self.event_bus, GameMode.SOLVED)
        session = get_session(self.world)
        if session is None:
            return
        session.wins += 1
        session.last_press_count = payload.get("press_count")
        logger.debug("Session wins: %s", session.wins)

    def _on_new_game_started(self, sender, **payload) -> None:
        set_game_mode(self.world, self.event_bus, GameMode.PLAYING)
