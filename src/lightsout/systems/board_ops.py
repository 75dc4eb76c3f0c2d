from __future__ import annotations

from typing import Tuple

from esper import World

from lightsout.components.button_row import ButtonRow
from lightsout.components.game_state import GameState


def get_board(world: World) -> Tuple[int, GameState]:
    """Return the board entity and its puzzle state."""
    for entity, _ in world.get_component(ButtonRow):
        return entity, world.component_for_entity(entity, GameState)
    raise RuntimeError("Board entity not found")


def get_game_state(world: World) -> GameState:
    return get_board(world)[1]


def find_game_state(world: World) -> GameState | None:
    """Like get_game_state but returns None when no board exists yet."""
    for _, state in world.get_component(GameState):
        return state
    return None


def replace_game_state(world: World, entity: int, state: GameState) -> None:
    """Swap in a fresh puzzle on the board entity."""
    if world.has_component(entity, GameState):
        world.remove_component(entity, GameState)
    world.add_component(entity, state)
