from __future__ import annotations

from esper import World

from lightsout.components.game_session import GameMode, GameSession
from lightsout.events.bus import EVENT_GAME_MODE_CHANGED, EventBus


def get_session(world: World) -> GameSession | None:
    for _, session in world.get_component(GameSession):
        return session
    return None


def set_game_mode(world: World, event_bus: EventBus, mode: GameMode) -> None:
    """Update the session mode and emit a change event when it differs."""

    previous_mode: GameMode | None = None
    for _, session in world.get_component(GameSession):
        previous_mode = session.mode
        if session.mode != mode:
            session.mode = mode
            event_bus.emit(
                EVENT_GAME_MODE_CHANGED,
                previous_mode=previous_mode,
                new_mode=mode,
            )
        return
    # No existing GameSession component; create a new one.
    session_entity = world.create_entity()
    world.add_component(session_entity, GameSession(mode=mode))
    event_bus.emit(
        EVENT_GAME_MODE_CHANGED,
        previous_mode=previous_mode,
        new_mode=mode,
    )
