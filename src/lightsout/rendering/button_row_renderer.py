"""Rendering helper for the row of puzzle buttons and its status text."""
from __future__ import annotations

from typing import Dict, Tuple

from lightsout.components.game_session import GameMode
from lightsout.constants import (
    BUTTON_GAP,
    BUTTON_OFF_COLOR,
    BUTTON_ON_COLOR,
    BUTTON_OUTLINE_COLOR,
    SOLVED_OUTLINE_COLOR,
    STATUS_TEXT_OFFSET,
    TEXT_COLOR,
)
from lightsout.rendering.context import RenderContext


class ButtonRowRenderer:
    """Draws one square per button and keeps their bounds for hit-testing."""

    def __init__(self) -> None:
        self._layout: Dict[int, Tuple[float, float, float, float]] = {}

    def render(self, arcade, ctx: RenderContext, *, headless: bool) -> None:
        size = ctx.button_size
        layout = {}
        for index in range(ctx.state.num_buttons):
            left = ctx.row_left + index * (size + BUTTON_GAP)
            layout[index] = (left, ctx.row_bottom, float(size), float(size))
        # Update layout cache even in headless mode.
        self._layout = layout

        if headless:
            return

        solved = ctx.mode == GameMode.SOLVED
        outline = SOLVED_OUTLINE_COLOR if solved else BUTTON_OUTLINE_COLOR
        for index, (left, bottom, width, height) in layout.items():
            fill = BUTTON_ON_COLOR if ctx.state.value_at(index) else BUTTON_OFF_COLOR
            arcade.draw_lbwh_rectangle_filled(left, bottom, width, height, fill)
            arcade.draw_lbwh_rectangle_outline(left, bottom, width, height, outline, border_width=2)

        center_x = ctx.window_width / 2
        arcade.draw_text(
            f"Presses: {ctx.state.press_count}",
            center_x,
            ctx.row_top + STATUS_TEXT_OFFSET,
            TEXT_COLOR,
            20,
            anchor_x="center",
            anchor_y="center",
        )
        status = "Solved! Click or press N for a new puzzle" if solved else "Make every light match"
        arcade.draw_text(
            status,
            center_x,
            ctx.row_bottom - STATUS_TEXT_OFFSET,
            SOLVED_OUTLINE_COLOR if solved else TEXT_COLOR,
            16,
            anchor_x="center",
            anchor_y="center",
            bold=solved,
        )

    def hit_test(self, x: float, y: float) -> int | None:
        for index, (left, bottom, width, height) in self._layout.items():
            if left <= x <= left + width and bottom <= y <= bottom + height:
                return index
        return None
