from dataclasses import dataclass

from lightsout.constants import DEFAULT_NUM_BUTTONS

@dataclass(slots=True)
class ButtonRow:
    """Configuration the board was created with; reused when a new puzzle starts.

    num_buttons is the size as requested (a GameState may clamp it upwards).
    """
    num_buttons: int = DEFAULT_NUM_BUTTONS
    strict: bool = False
