from __future__ import annotations

from lightsout.components.game_state import GameState, InvalidConfigurationError
from lightsout.constants import DEFAULT_NUM_BUTTONS, MIN_NUM_BUTTONS, RANDOMIZER_MULTIPLIER

__all__ = [
    "DEFAULT_NUM_BUTTONS",
    "GameState",
    "InvalidConfigurationError",
    "MIN_NUM_BUTTONS",
    "RANDOMIZER_MULTIPLIER",
]
