from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so systems nobody keeps in a variable still receive events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"        # payload: x, y, button
EVENT_BUTTON_CLICK = "button_click"      # payload: index=int


# ============================================================================
# PUZZLE MECHANICS
# ============================================================================
EVENT_BUTTON_PRESSED = "button_pressed"                # payload: index=int, toggled=list[int], press_count=int, values=str, is_win=bool
EVENT_BUTTON_PRESS_IGNORED = "button_press_ignored"    # payload: index=int, reason=str
EVENT_PUZZLE_SOLVED = "puzzle_solved"                  # payload: press_count=int, num_buttons=int


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_NEW_GAME_REQUEST = "new_game_request"    # payload: num_buttons=int|None
EVENT_NEW_GAME_STARTED = "new_game_started"    # payload: num_buttons=int, values=str
EVENT_GAME_MODE_CHANGED = "game_mode_changed"  # payload: previous_mode=GameMode|None, new_mode=GameMode
