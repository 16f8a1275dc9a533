"""
Core module of Arcade Pong game
"""

from arcade_pong.core.controls import CONTROL_KEYS
from arcade_pong.core.controls import DiscreteEvent
from arcade_pong.core.controls import Key
from arcade_pong.core.entities import Ball
from arcade_pong.core.entities import Paddle
from arcade_pong.core.entities import PaddleSide
from arcade_pong.core.entities import RoundState
from arcade_pong.core.entities import Score
from arcade_pong.core.entities import ScorePopup
from arcade_pong.core.entities import Vector2D
from arcade_pong.core.game_loop import GameLoop

__all__ = [
    "Ball",
    "Paddle",
    "PaddleSide",
    "RoundState",
    "Score",
    "ScorePopup",
    "Vector2D",
    "Key",
    "DiscreteEvent",
    "CONTROL_KEYS",
    "GameLoop",
]
