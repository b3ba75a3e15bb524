import enum


class Command(enum.Enum):
    SHOW_CODE = "show_code"
    HIDE_CODE = "hide_code"
    ROLL_DOWN = "roll_down"
    ROLL_UP = "roll_up"
    ROLL_SELECT = "roll_select"
    ADD_CAMERA = "add_camera"
    SCENE_UP = "scene_up"
    SCENE_DOWN = "scene_down"
    SCENE_JUMP = "scene_jump"
    DUAL_TOGGLE = "dual_toggle"
    LETTER_NEXT = "letter_next"
    LETTER_PREVIOUS = "letter_previous"
    LETTER_TOGGLE = "letter_toggle"
    LETTER_RESET = "letter_reset"
    TAKE_UP = "take_up"
    TAKE_DOWN = "take_down"
    SERIES_TOGGLE = "series_toggle"
    TAKE_RESET = "take_reset"
    CYCLE_TAKE_MODE = "cycle_take_mode"


# What the macro keypad sends, one encoder or button per pair. Case matters.
# CYCLE_TAKE_MODE has no key by default; it's reached from a tap or a custom keymap.
DEFAULT_KEYMAP: dict[str, Command] = {
    "[": Command.SHOW_CODE,
    "]": Command.HIDE_CODE,
    # encoder 1: roll
    "e": Command.ROLL_DOWN,
    "t": Command.ROLL_UP,
    "r": Command.ROLL_SELECT,
    "R": Command.ADD_CAMERA,
    # encoder 2: scene number
    "d": Command.SCENE_UP,
    "a": Command.SCENE_DOWN,
    "s": Command.SCENE_JUMP,
    "S": Command.DUAL_TOGGLE,
    # encoder 3: scene letter
    "c": Command.LETTER_NEXT,
    "z": Command.LETTER_PREVIOUS,
    "x": Command.LETTER_TOGGLE,
    "X": Command.LETTER_RESET,
    # encoder 4: take
    "l": Command.TAKE_UP,
    "j": Command.TAKE_DOWN,
    "k": Command.SERIES_TOGGLE,
    "K": Command.TAKE_RESET,
}
