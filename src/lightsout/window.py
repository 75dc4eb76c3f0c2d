from __future__ import annotations

import random

from arcade import Window, set_background_color

from lightsout.world import create_world
from lightsout.constants import (
    BACKGROUND_COLOR,
    DEFAULT_NUM_BUTTONS,
    WINDOW_HEIGHT,
    WINDOW_TITLE,
    WINDOW_WIDTH,
)
from lightsout.events.bus import EventBus, EVENT_MOUSE_PRESS
from lightsout.systems.board import BoardSystem
from lightsout.systems.game_flow_system import GameFlowSystem
from lightsout.systems.input import InputSystem
from lightsout.systems.render import RenderSystem


class LightsOutWindow(Window):
    """Arcade window that wires the ECS world, event bus and systems together."""

    def __init__(self, num_buttons: int = DEFAULT_NUM_BUTTONS, *, strict: bool = False, rng: random.Random | None = None):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, resizable=True)
        self.event_bus = EventBus()
        self.world = create_world(rng=rng)

        self.game_flow_system = GameFlowSystem(self.world, self.event_bus)
        self.board_system = BoardSystem(self.world, self.event_bus, num_buttons, strict=strict)
        self.render_system = RenderSystem(self.world, self.event_bus, self)
        self.input_system = InputSystem(self.event_bus, self, self.world)

        set_background_color(BACKGROUND_COLOR)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)

    def on_key_press(self, symbol: int, modifiers: int):
        self.input_system.handle_key_press(symbol, modifiers)
