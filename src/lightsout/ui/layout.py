from lightsout.constants import (
    BUTTON_GAP,
    MAX_BUTTON_SIZE,
    MIN_BUTTON_SIZE,
    ROW_MAX_HEIGHT_PCT,
    ROW_MAX_WIDTH_PCT,
)

def compute_row_geometry(window_width: int, window_height: int, num_buttons: int):
    """Return (button_size, start_x, start_y) for a horizontally centred row.

    Shared by rendering and input so hit-testing matches what is drawn.
    """
    max_row_w = window_width * ROW_MAX_WIDTH_PCT - BUTTON_GAP * (num_buttons - 1)
    max_row_h = window_height * ROW_MAX_HEIGHT_PCT
    button_size = int(min(max_row_w / num_buttons, max_row_h, MAX_BUTTON_SIZE))
    if button_size < MIN_BUTTON_SIZE:
        button_size = MIN_BUTTON_SIZE
    total_width = num_buttons * button_size + (num_buttons - 1) * BUTTON_GAP
    start_x = (window_width - total_width) / 2
    start_y = (window_height - button_size) / 2
    return button_size, start_x, start_y


def button_index_at(x: float, y: float, window_width: int, window_height: int, num_buttons: int):
    """Index of the button under (x, y), or None for gaps and empty space."""
    button_size, start_x, start_y = compute_row_geometry(window_width, window_height, num_buttons)
    if y < start_y or y > start_y + button_size:
        return None
    step = button_size + BUTTON_GAP
    offset = x - start_x
    if offset < 0:
        return None
    index = int(offset // step)
    if index >= num_buttons or offset - index * step > button_size:
        return None
    return index
