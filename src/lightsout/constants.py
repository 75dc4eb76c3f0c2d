# ============================================================================
# PUZZLE RULES
# ============================================================================
MIN_NUM_BUTTONS = 3
DEFAULT_NUM_BUTTONS = 7
# Random presses per button applied when shuffling a fresh puzzle.
RANDOMIZER_MULTIPLIER = 10


# ============================================================================
# WINDOW & LAYOUT
# ============================================================================
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
WINDOW_TITLE = "Linear Lights Out"

# Row of buttons may not exceed these fractions of the window.
ROW_MAX_WIDTH_PCT = 0.85
ROW_MAX_HEIGHT_PCT = 0.40
BUTTON_GAP = 8
MIN_BUTTON_SIZE = 20
MAX_BUTTON_SIZE = 120
# Space reserved above the row for the press counter and status line.
STATUS_TEXT_OFFSET = 48


# ============================================================================
# COLOURS
# ============================================================================
BACKGROUND_COLOR = (18, 22, 34)
BUTTON_OFF_COLOR = (52, 60, 84)
BUTTON_ON_COLOR = (236, 196, 72)
BUTTON_OUTLINE_COLOR = (200, 200, 220)
SOLVED_OUTLINE_COLOR = (96, 200, 120)
TEXT_COLOR = (240, 240, 255)

# arcade.MOUSE_BUTTON_LEFT / arcade.key.N, kept numeric to avoid importing arcade.
MOUSE_BUTTON_LEFT = 1
KEY_NEW_GAME = 110
