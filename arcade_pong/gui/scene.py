"""
Composition of one frame from the game state
"""

from arcade_pong.core.entities import RoundState
from arcade_pong.core.game_loop import GameLoop
from arcade_pong.core.interfaces.renderer import Color
from arcade_pong.core.interfaces.renderer import RendererProtocol
from arcade_pong.utils.config import game_config


def player_color(player_id: int) -> Color:
    return game_config.PLAYER1_COLOR if player_id == 1 else game_config.PLAYER2_COLOR


def draw_frame(renderer: RendererProtocol, game: GameLoop) -> None:
    """
    Draws the current state of the game.

    Order: background, center divider, paddles, ball, scores, score popup,
    game over texts, pause text.
    """
    width = game.field_width
    height = game.field_height

    renderer.clear(game_config.BACKGROUND_COLOR)

    renderer.draw_rect(width / 2 - 2, 0, 4, height, game_config.DIVIDER_COLOR)

    renderer.draw_rect(*game.player1.get_rect(), game_config.PLAYER1_COLOR)
    renderer.draw_rect(*game.player2.get_rect(), game_config.PLAYER2_COLOR)

    renderer.draw_rect(*game.ball.get_rect(), game_config.BALL_COLOR)

    renderer.draw_text(str(game.score.player1), width / 4, 30, game_config.TEXT_COLOR)
    renderer.draw_text(str(game.score.player2), width * 3 / 4, 30, game_config.TEXT_COLOR)

    if game.popup.visible:
        renderer.draw_text(
            f"PLAYER {game.popup.player} +1",
            width / 2 - 90,
            height / 2 - 20,
            player_color(game.popup.player),
        )

    if game.state == RoundState.GAME_OVER:
        renderer.draw_text(
            f"PLAYER {game.get_winner()} WINS!",
            width / 2 - 150,
            height / 2 - 30,
            game_config.WIN_TEXT_COLOR,
        )
        renderer.draw_text(
            "Press R to Restart", width / 2 - 150, height / 2 + 20, game_config.TEXT_COLOR
        )

    if game.state == RoundState.PAUSED:
        renderer.draw_text("PAUSED", width / 2 - 60, height / 2 - 20, game_config.PAUSE_TEXT_COLOR)

    renderer.present()
