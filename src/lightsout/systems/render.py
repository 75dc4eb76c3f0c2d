from esper import World

from lightsout.events.bus import EventBus, EVENT_NEW_GAME_STARTED
from lightsout.components.game_session import GameMode
from lightsout.rendering.context import RenderContext, build_render_context
from lightsout.rendering.button_row_renderer import ButtonRowRenderer
from lightsout.systems.board_ops import find_game_state
from lightsout.utils.game_mode import get_session

class RenderSystem:
    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.event_bus.subscribe(EVENT_NEW_GAME_STARTED, self.on_new_game_started)
        self._render_ctx: RenderContext | None = None
        self._button_row_renderer = ButtonRowRenderer()

    def on_new_game_started(self, sender, **kwargs):
        # Row size may have changed; drop stale hit boxes until the next frame.
        self._render_ctx = None

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        self.render(arcade, headless=headless)

    def render(self, arcade, *, headless: bool) -> None:
        state = find_game_state(self.world)
        if state is None:
            self._render_ctx = None
            return
        ctx = build_render_context(
            window_width=self.window.width,
            window_height=self.window.height,
            state=state,
            mode=self._current_mode(),
        )
        self._render_ctx = ctx
        self._button_row_renderer.render(arcade, ctx, headless=headless)

    def get_button_at_point(self, x: float, y: float):
        """Return the button index if point inside its square."""
        if self._render_ctx is None:
            return None
        return self._button_row_renderer.hit_test(x, y)

    def _current_mode(self) -> GameMode:
        session = get_session(self.world)
        if session is None:
            return GameMode.PLAYING
        return session.mode
