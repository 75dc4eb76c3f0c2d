from lightsout.events.bus import (
    EventBus,
    EVENT_MOUSE_PRESS,
    EVENT_BUTTON_CLICK,
    EVENT_NEW_GAME_REQUEST,
)
from lightsout.constants import KEY_NEW_GAME, MOUSE_BUTTON_LEFT
from lightsout.ui.layout import button_index_at
from lightsout.components.game_session import GameMode
from lightsout.systems.board_ops import find_game_state
from lightsout.utils.game_mode import get_session

class InputSystem:
    def __init__(self, event_bus: EventBus, window, world):
        self.event_bus = event_bus
        self.window = window
        self.world = world
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None:
            return
        # Only the left button interacts with the puzzle.
        if button != MOUSE_BUTTON_LEFT:
            return
        session = get_session(self.world)
        if session is not None and session.mode == GameMode.SOLVED:
            self.event_bus.emit(EVENT_NEW_GAME_REQUEST)
            return
        index = self._button_at(x, y)
        if index is None:
            return
        self.event_bus.emit(EVENT_BUTTON_CLICK, index=index)

    def handle_key_press(self, symbol: int, modifiers: int) -> None:
        if symbol == KEY_NEW_GAME:
            self.event_bus.emit(EVENT_NEW_GAME_REQUEST)

    def _button_at(self, x: float, y: float):
        # Prefer the render system's cached layout when it has drawn a frame.
        render_system = getattr(self.window, 'render_system', None)
        if render_system and hasattr(render_system, 'get_button_at_point'):
            index = render_system.get_button_at_point(x, y)
            if index is not None:
                return index
        state = find_game_state(self.world)
        if state is None:
            return None
        return button_index_at(x, y, self.window.width, self.window.height, state.num_buttons)
