"""
Frame update state machine of Arcade Pong
"""

import logging
from collections.abc import Iterable
from typing import Any

from arcade_pong.core.controls import CONTROL_KEYS
from arcade_pong.core.controls import DiscreteEvent
from arcade_pong.core.controls import Key
from arcade_pong.core.entities import Ball
from arcade_pong.core.entities import Paddle
from arcade_pong.core.entities import PaddleSide
from arcade_pong.core.entities import RoundState
from arcade_pong.core.entities import Score
from arcade_pong.core.entities import ScorePopup
from arcade_pong.core.entities import rects_intersect
from arcade_pong.utils.config import game_config

logger = logging.getLogger(__name__)


class GameLoop:
    """Owns the whole game state and advances it once per frame"""

    def __init__(self, field_width: float | None = None, field_height: float | None = None):
        self.field_width = field_width if field_width is not None else game_config.FIELD_WIDTH
        self.field_height = field_height if field_height is not None else game_config.FIELD_HEIGHT

        self.reset_paddles()

        self.score = Score()
        self.popup = ScorePopup()
        self.state = RoundState.PLAYING
        self.running = True

        self.reset_ball()

    def reset_paddles(self) -> None:
        """Places both paddles at their initial position"""
        self.player1 = Paddle(
            game_config.PADDLE_MARGIN, 0.0, PaddleSide.LEFT, field_height=self.field_height
        )
        self.player2 = Paddle(
            self.field_width - game_config.PADDLE_MARGIN - game_config.PADDLE_WIDTH,
            0.0,
            PaddleSide.RIGHT,
            field_height=self.field_height,
        )
        for paddle in self.paddles.values():
            paddle.reset_to_center()

    def reset_ball(self) -> None:
        """Puts a new ball at the center, moving right and down at base speed"""
        velocity = game_config.BALL_VELOCITY
        self.ball = Ball(self.field_width / 2, self.field_height / 2, velocity, velocity)

    @property
    def paddles(self) -> dict[PaddleSide, Paddle]:
        return {PaddleSide.LEFT: self.player1, PaddleSide.RIGHT: self.player2}

    def paddle_for(self, side: PaddleSide) -> Paddle:
        return self.paddles[side]

    def handle_discrete_events(self, events: Iterable[DiscreteEvent]) -> bool:
        """
        Applies the discrete signals collected since the previous frame

        Args:
            events: Signals in arrival order

        Returns:
            bool: False once a quit signal has been seen
        """
        for event in events:
            if event == DiscreteEvent.QUIT:
                logger.debug("Quit requested")
                self.running = False
                break
            elif event == DiscreteEvent.TOGGLE_PAUSE:
                self.toggle_pause()
            elif event == DiscreteEvent.RESTART:
                self.restart()

        return self.running

    def toggle_pause(self) -> None:
        """Pauses / resumes the round, no effect once the game is over"""
        if self.state == RoundState.PLAYING:
            self.state = RoundState.PAUSED
        elif self.state == RoundState.PAUSED:
            self.state = RoundState.PLAYING
        else:
            return
        logger.debug("Round state is now %s", self.state.value)

    def restart(self) -> None:
        """Starts a new game, paddles keep their position"""
        self.score.reset()
        self.state = RoundState.PLAYING
        self.reset_ball()
        logger.info("Game restarted")

    def update(self, dt: float, held_keys: Iterable[Key]) -> dict[str, Any]:
        """
        Advances the game by one frame

        Args:
            dt: Seconds elapsed since the previous frame
            held_keys: Movement keys currently held down

        Returns:
            Dict with the events that occurred during the frame
        """
        events: dict[str, Any] = {
            "wall_bounces": [],
            "paddle_hits": [],
            "goals": [],
            "game_over": False,
        }
        if self.state != RoundState.PLAYING:
            return events

        held = set(held_keys)
        for side, (up_key, down_key) in CONTROL_KEYS.items():
            self.paddle_for(side).move(up_key in held, down_key in held, dt)

        self.ball.update(dt)

        if self.ball.top <= 0 or self.ball.bottom >= self.field_height:
            self.ball.bounce_vertical()
            events["wall_bounces"].append("top" if self.ball.top <= 0 else "bottom")

        # Both checks always run; on a double overlap the right paddle wins
        if rects_intersect(self.ball.get_rect(), self.player1.get_rect()):
            self.ball.send_right()
            self.ball.accelerate()
            events["paddle_hits"].append({"player": self.player1.player_id})
        if rects_intersect(self.ball.get_rect(), self.player2.get_rect()):
            self.ball.send_left()
            self.ball.accelerate()
            events["paddle_hits"].append({"player": self.player2.player_id})

        if self.ball.left <= 0:
            self._goal(self.player2.player_id)
            events["goals"].append({"player": 2, "score": self.score.to_tuple()})
        elif self.ball.right >= self.field_width:
            self._goal(self.player1.player_id)
            events["goals"].append({"player": 1, "score": self.score.to_tuple()})

        if self.score.reached(game_config.WIN_SCORE):
            self.state = RoundState.GAME_OVER
            events["game_over"] = True
            logger.info("Game over, player %d wins", self.get_winner())

        self.popup.tick(dt)

        return events

    def _goal(self, player_id: int) -> None:
        """Counts a point and serves the ball toward the scorer"""
        self.score.increment(player_id)
        self.popup.show(player_id)
        self.ball.move_to(self.field_width / 2, self.field_height / 2)
        if player_id == 2:
            self.ball.send_right()
        else:
            self.ball.send_left()
        self.ball.reset_speed()
        logger.debug("Player %d scores: %s", player_id, self.score.to_tuple())

    def is_game_over(self) -> bool:
        """Checks if the game is over"""
        return self.state == RoundState.GAME_OVER

    def get_winner(self) -> int:
        """Returns the winner (1 or 2), or 0 while the game is not over"""
        if not self.is_game_over():
            return 0
        return self.score.leader()

    def get_game_state(self) -> dict[str, Any]:
        """Returns the complete game state"""
        return {
            "ball_position": self.ball.position.to_tuple(),
            "ball_velocity": self.ball.velocity.to_tuple(),
            "ball_speed": self.ball.speed,
            "player1_position": self.player1.position.to_tuple(),
            "player2_position": self.player2.position.to_tuple(),
            "score": self.score.to_tuple(),
            "state": self.state.value,
            "popup": (self.popup.player, self.popup.remaining),
            "field_bounds": (0, self.field_width, 0, self.field_height),
        }
