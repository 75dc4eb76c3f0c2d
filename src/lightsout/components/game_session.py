"""Session resource describing whether the current puzzle is still in play."""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class GameMode(Enum):
    """High-level modes that decide how input is interpreted."""
    PLAYING = auto()
    SOLVED = auto()


@dataclass
class GameSession:
    """Singleton component storing the active mode and the session tally."""
    mode: GameMode = GameMode.PLAYING
    wins: int = 0
    last_press_count: Optional[int] = None
