from __future__ import annotations

from dataclasses import dataclass

from lightsout.components.game_session import GameMode
from lightsout.components.game_state import GameState
from lightsout.ui.layout import compute_row_geometry


@dataclass(slots=True)
class RenderContext:
    """Frame-scoped rendering data shared across renderer subcomponents."""

    window_width: int
    window_height: int
    button_size: int
    row_left: float
    row_bottom: float
    state: GameState
    mode: GameMode

    @property
    def row_top(self) -> float:
        return self.row_bottom + self.button_size


def build_render_context(
    *,
    window_width: int,
    window_height: int,
    state: GameState,
    mode: GameMode,
) -> RenderContext:
    button_size, row_left, row_bottom = compute_row_geometry(
        window_width, window_height, state.num_buttons
    )
    return RenderContext(
        window_width=window_width,
        window_height=window_height,
        button_size=button_size,
        row_left=row_left,
        row_bottom=row_bottom,
        state=state,
        mode=mode,
    )
