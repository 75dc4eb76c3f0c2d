import random
from typing import Any

from lightsout.constants import BUTTON_GAP, KEY_NEW_GAME
from lightsout.events.bus import (
    EventBus,
    EVENT_BUTTON_CLICK,
    EVENT_MOUSE_PRESS,
    EVENT_NEW_GAME_REQUEST,
)
from lightsout.components.game_session import GameMode
from lightsout.systems.board import BoardSystem
from lightsout.systems.input import InputSystem
from lightsout.ui.layout import compute_row_geometry
from lightsout.utils.game_mode import set_game_mode
from lightsout.world import create_world
from tests.helpers import collect_events


class DummyWindow:
    def __init__(self, width=800, height=600):
        self.width = width
        self.height = height
        self.render_system: Any | None = None


def _setup(num_buttons=5):
    bus = EventBus()
    world = create_world(rng=random.Random(0))
    BoardSystem(world, bus, num_buttons)
    window = DummyWindow()
    input_system = InputSystem(bus, window, world)
    return bus, world, window, input_system


def _centre_of(window, num_buttons, index):
    size, start_x, start_y = compute_row_geometry(window.width, window.height, num_buttons)
    return start_x + index * (size + BUTTON_GAP) + size / 2, start_y + size / 2


def test_mouse_press_translates_to_button_click():
    bus, world, window, _ = _setup()
    clicks = collect_events(bus, EVENT_BUTTON_CLICK)
    x, y = _centre_of(window, 5, 3)
    bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=1)
    assert clicks == [{"index": 3}]


def test_non_left_buttons_and_misses_are_ignored():
    bus, world, window, _ = _setup()
    clicks = collect_events(bus, EVENT_BUTTON_CLICK)
    x, y = _centre_of(window, 5, 1)
    bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=4)
    bus.emit(EVENT_MOUSE_PRESS, x=1, y=1, button=1)
    bus.emit(EVENT_MOUSE_PRESS, x=x, button=1)
    assert clicks == []


def test_click_after_solving_requests_new_game():
    bus, world, window, _ = _setup()
    clicks = collect_events(bus, EVENT_BUTTON_CLICK)
    requests = collect_events(bus, EVENT_NEW_GAME_REQUEST)
    set_game_mode(world, bus, GameMode.SOLVED)
    x, y = _centre_of(window, 5, 2)
    bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=1)
    assert clicks == []
    assert requests == [{}]


def test_new_game_key():
    bus, world, window, input_system = _setup()
    requests = collect_events(bus, EVENT_NEW_GAME_REQUEST)
    input_system.handle_key_press(KEY_NEW_GAME, 0)
    input_system.handle_key_press(KEY_NEW_GAME + 1, 0)
    assert requests == [{}]


class StubRenderSystem:
    def __init__(self, index):
        self._index = index

    def get_button_at_point(self, x, y):
        return self._index


def test_render_layout_cache_takes_precedence():
    bus, world, window, _ = _setup()
    window.render_system = StubRenderSystem(4)
    clicks = collect_events(bus, EVENT_BUTTON_CLICK)
    x, y = _centre_of(window, 5, 0)
    bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=1)
    assert clicks == [{"index": 4}]


def test_falls_back_to_layout_when_render_cache_is_empty():
    bus, world, window, _ = _setup()
    window.render_system = StubRenderSystem(None)
    clicks = collect_events(bus, EVENT_BUTTON_CLICK)
    x, y = _centre_of(window, 5, 0)
    bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=1)
    assert clicks == [{"index": 0}]
