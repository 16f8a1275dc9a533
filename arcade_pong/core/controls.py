"""
Abstract controls of Arcade Pong, independent of any input backend
"""

from enum import Enum

from arcade_pong.core.entities import PaddleSide


class Key(Enum):
    """Continuously sampled movement keys"""

    MOVE_P1_UP = "move_p1_up"
    MOVE_P1_DOWN = "move_p1_down"
    MOVE_P2_UP = "move_p2_up"
    MOVE_P2_DOWN = "move_p2_down"


class DiscreteEvent(Enum):
    """Signals fired once per press"""

    QUIT = "quit"
    TOGGLE_PAUSE = "toggle_pause"
    RESTART = "restart"


# side -> (up key, down key)
CONTROL_KEYS: dict[PaddleSide, tuple[Key, Key]] = {
    PaddleSide.LEFT: (Key.MOVE_P1_UP, Key.MOVE_P1_DOWN),
    PaddleSide.RIGHT: (Key.MOVE_P2_UP, Key.MOVE_P2_DOWN),
}
