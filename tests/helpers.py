from __future__ import annotations

from typing import Any, Iterable

from lightsout.components.game_state import GameState
from lightsout.events.bus import EventBus


class FixedIndexSource:
    """Index source replaying a fixed sequence, then cycling through it again."""

    def __init__(self, indices: Iterable[int]) -> None:
        self._indices = list(indices)
        self._pos = 0
        self.calls: list[int] = []

    def randrange(self, n: int) -> int:
        self.calls.append(n)
        value = self._indices[self._pos % len(self._indices)]
        self._pos += 1
        return value % n


def board_values(state: GameState) -> list[int]:
    return [state.value_at(i) for i in range(state.num_buttons)]


def collect_events(bus: EventBus, name: str) -> list[dict[str, Any]]:
    """Subscribe to ``name`` and return the list every payload gets appended to."""

    received: list[dict[str, Any]] = []

    def handler(sender, **payload):
        received.append(payload)

    bus.subscribe(name, handler)
    return received
