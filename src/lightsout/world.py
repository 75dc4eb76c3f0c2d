import random

from esper import World
from lightsout.components.game_session import GameSession, GameMode


def create_world(
    initial_mode: GameMode = GameMode.PLAYING,
    *,
    rng: random.Random | None = None,
) -> World:
    """Create the world and its session resource.

    ``world.random`` is the shared RNG systems fall back to; pass a seeded
    ``random.Random`` for reproducible puzzles.
    """
    world = World()
    setattr(world, "random", rng or random.Random())

    # Register the global session resource.
    session_entity = world.create_entity()
    world.add_component(session_entity, GameSession(mode=initial_mode))
    return world
