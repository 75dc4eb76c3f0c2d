"""Linear lights out puzzle state.

A row of buttons that each hold 0 or 1. Pressing a button toggles it and its
immediate left/right neighbours (no wraparound). The puzzle is solved when
every button holds the same value.
"""
from __future__ import annotations

import logging
import random
from typing import Iterable, List, Protocol, Tuple

from lightsout.constants import DEFAULT_NUM_BUTTONS, MIN_NUM_BUTTONS, RANDOMIZER_MULTIPLIER

logger = logging.getLogger(__name__)


class InvalidConfigurationError(ValueError):
    """Raised for puzzle sizes or cell values that cannot form a valid board."""


class IndexSource(Protocol):
    """Anything able to draw a uniform integer in ``[0, n)``; ``random.Random`` qualifies."""

    def randrange(self, n: int) -> int: ...


class GameState:
    """Cells, press counter and setup flag for one linear lights out puzzle.

    Construction always shuffles the board by pressing random buttons starting
    from an all-equal row, so every generated puzzle can be solved. The shuffle
    never stops on a solved row.
    """

    def __init__(
        self,
        num_buttons: int = DEFAULT_NUM_BUTTONS,
        *,
        rng: IndexSource | None = None,
        strict: bool = False,
    ) -> None:
        if num_buttons < MIN_NUM_BUTTONS:
            if strict:
                raise InvalidConfigurationError(
                    f"Need at least {MIN_NUM_BUTTONS} buttons, got {num_buttons}"
                )
            logger.debug("Clamping button count %s up to %s", num_buttons, MIN_NUM_BUTTONS)
            num_buttons = MIN_NUM_BUTTONS
        self._cells: List[int] = [0] * num_buttons
        self._press_count = 0
        self.setting_up = True
        self._randomize(rng or random.Random())
        self.setting_up = False

    @classmethod
    def from_values(cls, values: Iterable[int]) -> "GameState":
        """Build a state holding exactly ``values`` with no shuffle and no presses counted."""
        cells = list(values)
        if len(cells) < MIN_NUM_BUTTONS:
            raise InvalidConfigurationError(
                f"Need at least {MIN_NUM_BUTTONS} buttons, got {len(cells)}"
            )
        if any(value not in (0, 1) for value in cells):
            raise InvalidConfigurationError(f"Button values must be 0 or 1, got {cells}")
        state = cls.__new__(cls)
        state._cells = [int(value) for value in cells]
        state._press_count = 0
        state.setting_up = False
        return state

    def _randomize(self, rng: IndexSource) -> None:
        n = len(self._cells)
        for _ in range(n * RANDOMIZER_MULTIPLIER):
            self.press(rng.randrange(n))
        # Never hand out an already solved puzzle.
        while self.is_win() and n > 2:
            self.press(rng.randrange(n))
        self._press_count = 0

    def press(self, index: int) -> bool:
        """Press the button at ``index`` and return whether the row is now solved.

        Out-of-range indices are ignored and report False. Once solved, further
        presses are ignored and report True (except while setting up).
        """
        if index < 0 or index >= len(self._cells):
            return False
        if not self.setting_up and self.is_win():
            return True
        self._press_count += 1
        for i in self.affected_indices(index):
            self._cells[i] ^= 1
        return self.is_win()

    def affected_indices(self, index: int) -> List[int]:
        """In-range indices a press at ``index`` toggles."""
        n = len(self._cells)
        if index < 0 or index >= n:
            return []
        return [i for i in (index - 1, index, index + 1) if 0 <= i < n]

    def is_win(self) -> bool:
        first = self._cells[0]
        return all(value == first for value in self._cells)

    def value_at(self, index: int) -> int:
        if index < 0 or index >= len(self._cells):
            raise IndexError(f"Button index {index} out of range for {len(self._cells)} buttons")
        return self._cells[index]

    @property
    def press_count(self) -> int:
        """Number of accepted presses since the puzzle was created."""
        return self._press_count

    @property
    def num_buttons(self) -> int:
        return len(self._cells)

    @property
    def values(self) -> Tuple[int, ...]:
        return tuple(self._cells)

    def to_display_string(self) -> str:
        return "".join(str(value) for value in self._cells)

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return f"GameState(values={self.to_display_string()!r}, press_count={self._press_count})"
