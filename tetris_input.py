"""Key bindings and DAS/ARR auto-repeat"""
from enum import Enum
from typing import Optional

from tetris_config import CONFIG


class Command(Enum):
    ROTATE = "rotate"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    SOFT_DROP = "soft_drop"
    HARD_DROP = "hard_drop"
    PAUSE = "pause"
    RESTART = "restart"


# pygame.key.name() values
KEY_BINDINGS = {
    "up": Command.ROTATE, "w": Command.ROTATE, "i": Command.ROTATE,
    "right": Command.MOVE_RIGHT, "d": Command.MOVE_RIGHT, "l": Command.MOVE_RIGHT,
    "left": Command.MOVE_LEFT, "a": Command.MOVE_LEFT, "j": Command.MOVE_LEFT,
    "down": Command.SOFT_DROP, "s": Command.SOFT_DROP, "k": Command.SOFT_DROP,
    "space": Command.HARD_DROP, "return": Command.HARD_DROP, "enter": Command.HARD_DROP,
    "p": Command.PAUSE,
    "r": Command.RESTART,
}

REPEATABLE = {Command.MOVE_LEFT, Command.MOVE_RIGHT, Command.SOFT_DROP}


def command_for_key(name: str, game_over: bool = False) -> Optional[Command]:
    """Map a key name to a command; the drop keys restart once the game is over."""
    command = KEY_BINDINGS.get(name.lower())
    if command is Command.HARD_DROP and game_over:
        return Command.RESTART
    return command


class ShiftRepeat:
    """
    Repeats a held movement command.

    The key press itself issues the first step; after DAS_MS of holding the
    command repeats every ARR_MS (0 => every update). Pressing another
    repeatable command takes over, releasing it stops.
    """

    def __init__(self):
        self.command: Optional[Command] = None
        self.held_ms = 0.0
        self.last_step_ms = 0.0

    def press(self, command: Command):
        if command not in REPEATABLE:
            return
        self.command = command
        self.held_ms = 0.0
        self.last_step_ms = 0.0

    def release(self, command: Command):
        if command is self.command:
            self.command = None

    def reset(self):
        self.command = None

    def update(self, dt_ms: float) -> Optional[Command]:
        if self.command is None:
            return None
        self.held_ms += dt_ms
        if self.held_ms < CONFIG["DAS_MS"]:
            return None
        arr = CONFIG["ARR_MS"]
        if arr == 0:
            return self.command
        self.last_step_ms += dt_ms
        if self.last_step_ms >= arr:
            self.last_step_ms = 0.0
            return self.command
        return None
