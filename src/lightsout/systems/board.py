import logging
import random

from esper import World
from lightsout.events.bus import (
    EventBus,
    EVENT_BUTTON_CLICK,
    EVENT_BUTTON_PRESSED,
    EVENT_BUTTON_PRESS_IGNORED,
    EVENT_NEW_GAME_REQUEST,
    EVENT_NEW_GAME_STARTED,
    EVENT_PUZZLE_SOLVED,
)
from lightsout.components.button_row import ButtonRow
from lightsout.components.game_state import GameState, InvalidConfigurationError
from lightsout.constants import DEFAULT_NUM_BUTTONS
from lightsout.systems.board_ops import get_board, replace_game_state

logger = logging.getLogger(__name__)


class BoardSystem:
    """Owns the board entity and applies button clicks to its GameState."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        num_buttons: int = DEFAULT_NUM_BUTTONS,
        *,
        strict: bool = False,
        rng: random.Random | None = None,
    ):
        self.world = world
        self.event_bus = event_bus
        self.random = rng or getattr(world, "random", None) or random.Random()
        # Create a single board entity; strict mode errors surface here before it exists.
        state = GameState(num_buttons, rng=self.random, strict=strict)
        self.board_entity = self.world.create_entity(
            ButtonRow(num_buttons=num_buttons, strict=strict),
            state,
        )
        logger.debug("Created board %s", state)
        self.event_bus.subscribe(EVENT_BUTTON_CLICK, self.on_button_click)
        self.event_bus.subscribe(EVENT_NEW_GAME_REQUEST, self.on_new_game_request)

    def on_button_click(self, sender, **kwargs):
        index = kwargs.get('index')
        if index is None:
            return
        self.press(int(index))

    def press(self, index: int) -> bool:
        """Press a button and broadcast the outcome. Returns the GameState result."""
        _, state = get_board(self.world)
        was_solved = state.is_win()
        before = state.press_count
        toggled = state.affected_indices(index)
        result = state.press(index)
        if state.press_count == before:
            reason = 'already_solved' if toggled else 'out_of_range'
            logger.debug("Ignored press at %s (%s)", index, reason)
            self.event_bus.emit(EVENT_BUTTON_PRESS_IGNORED, index=index, reason=reason)
            return result
        logger.debug("Pressed %s -> %s (%s presses)", index, state, state.press_count)
        self.event_bus.emit(
            EVENT_BUTTON_PRESSED,
            index=index,
            toggled=toggled,
            press_count=state.press_count,
            values=state.to_display_string(),
            is_win=result,
        )
        if result and not was_solved:
            logger.info("Puzzle solved in %s presses", state.press_count)
            self.event_bus.emit(
                EVENT_PUZZLE_SOLVED,
                press_count=state.press_count,
                num_buttons=state.num_buttons,
            )
        return result

    def on_new_game_request(self, sender, **kwargs):
        requested = kwargs.get('num_buttons')
        try:
            size = int(requested) if requested is not None else None
            self.new_game(size)
        except (InvalidConfigurationError, TypeError, ValueError) as exc:
            # Keep the current puzzle; the request came from the event loop.
            logger.warning("Ignoring new game request for %r buttons: %s", requested, exc)

    def new_game(self, num_buttons: int | None = None) -> GameState:
        """Replace the puzzle with a freshly shuffled one, optionally resizing the row."""
        row: ButtonRow = self.world.component_for_entity(self.board_entity, ButtonRow)
        size = row.num_buttons if num_buttons is None else num_buttons
        state = GameState(size, rng=self.random, strict=row.strict)
        row.num_buttons = size
        replace_game_state(self.world, self.board_entity, state)
        logger.debug("New game %s", state)
        self.event_bus.emit(
            EVENT_NEW_GAME_STARTED,
            num_buttons=state.num_buttons,
            values=state.to_display_string(),
        )
        return state
