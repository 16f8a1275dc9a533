"""
Arcade Pong game entities: ball, paddles, score
"""

from dataclasses import dataclass
from enum import Enum

from arcade_pong.utils.config import game_config

Rect = tuple[float, float, float, float]


class PaddleSide(Enum):
    """Side of the field a paddle defends"""

    LEFT = "left"
    RIGHT = "right"

    @property
    def player_id(self) -> int:
        return 1 if self is PaddleSide.LEFT else 2


class RoundState(Enum):
    """State of the current round"""

    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass
class Vector2D:
    """Simple 2D vector for positions and velocities"""

    x: float
    y: float

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __mul__(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y * scalar)

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def copy(self) -> "Vector2D":
        return Vector2D(self.x, self.y)


def rects_intersect(a: Rect, b: Rect) -> bool:
    """Checks if two rectangles overlap (touching edges do not count)"""
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return ax < bx + bw and bx < ax + aw and ay < by + bh and by < ay + ah


class Ball:
    """Game ball, a square whose position is its top-left corner"""

    def __init__(self, x: float, y: float, vx: float, vy: float, size: float | None = None):
        self.position = Vector2D(x, y)
        self.velocity = Vector2D(vx, vy)
        self.size = size if size is not None else game_config.BALL_SIZE
        self.speed = game_config.BALL_SPEED

    def update(self, dt: float) -> None:
        """Moves the ball; screen speed scales with speed / SPEED_DIVISOR"""
        scale = dt * (self.speed / game_config.SPEED_DIVISOR)
        self.position = self.position + self.velocity * scale

    def bounce_vertical(self) -> None:
        """Vertical bounce (top/bottom walls)"""
        self.velocity.y = -self.velocity.y

    def send_right(self) -> None:
        self.velocity.x = abs(self.velocity.x)

    def send_left(self) -> None:
        self.velocity.x = -abs(self.velocity.x)

    def accelerate(self, increment: float | None = None) -> None:
        """Increases the speed scalar after a paddle hit"""
        self.speed += increment if increment is not None else game_config.BALL_SPEED_INCREMENT

    def reset_speed(self) -> None:
        self.speed = game_config.BALL_SPEED

    def move_to(self, x: float, y: float) -> None:
        self.position = Vector2D(x, y)

    @property
    def left(self) -> float:
        return self.position.x

    @property
    def right(self) -> float:
        return self.position.x + self.size

    @property
    def top(self) -> float:
        return self.position.y

    @property
    def bottom(self) -> float:
        return self.position.y + self.size

    def get_rect(self) -> Rect:
        """Returns the collision rectangle properties (x, y, width, height)"""
        return (self.position.x, self.position.y, self.size, self.size)


class Paddle:
    """Player paddle, moving vertically only"""

    def __init__(
        self,
        x: float,
        y: float,
        side: PaddleSide,
        width: float | None = None,
        height: float | None = None,
        field_height: float | None = None,
    ):
        self.position = Vector2D(x, y)
        self.side = side
        self.speed = game_config.PADDLE_SPEED
        self.width = width if width is not None else game_config.PADDLE_WIDTH
        self.height = height if height is not None else game_config.PADDLE_HEIGHT
        self.field_height = field_height if field_height is not None else game_config.FIELD_HEIGHT

        self.min_y = 0.0
        self.max_y = self.field_height - self.height

    @property
    def player_id(self) -> int:
        return self.side.player_id

    def constrain_position(self) -> None:
        """Ensures the paddle stays within its movement bounds"""
        self.position.y = max(self.min_y, min(self.max_y, self.position.y))

    def move(self, up: bool, down: bool, dt: float) -> None:
        """Moves the paddle according to held keys, both may be held at once"""
        step = self.speed * dt
        if up and self.position.y > self.min_y:
            self.position.y -= step
        if down and self.position.y < self.max_y:
            self.position.y += step

        self.constrain_position()

    def reset_to_center(self) -> None:
        self.position.y = self.field_height / 2 - self.height / 2

    def get_rect(self) -> Rect:
        """Returns the collision rectangle properties (x, y, width, height)"""
        return (self.position.x, self.position.y, self.width, self.height)


@dataclass
class Score:
    """Points of both players"""

    player1: int = 0
    player2: int = 0

    def increment(self, player_id: int) -> None:
        if player_id == 1:
            self.player1 += 1
        elif player_id == 2:
            self.player2 += 1
        else:
            raise ValueError(f"Unknown player id: {player_id}")

    def reset(self) -> None:
        self.player1 = 0
        self.player2 = 0

    def reached(self, threshold: int) -> bool:
        """True once either player has at least `threshold` points"""
        return self.player1 >= threshold or self.player2 >= threshold

    def leader(self) -> int:
        """Player ahead; ties go to player 2"""
        return 1 if self.player1 > self.player2 else 2

    def to_tuple(self) -> tuple[int, int]:
        return (self.player1, self.player2)


@dataclass
class ScorePopup:
    """Transient "+1" message shown after a point"""

    player: int = 0
    remaining: float = 0.0

    def show(self, player_id: int, duration: float | None = None) -> None:
        self.player = player_id
        self.remaining = duration if duration is not None else game_config.POPUP_DURATION

    def tick(self, dt: float) -> None:
        if self.remaining > 0:
            self.remaining -= dt

    @property
    def visible(self) -> bool:
        return self.remaining > 0
