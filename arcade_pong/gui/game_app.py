"""
Main game application with PyGame GUI
"""

import argparse
import logging
from collections.abc import Sequence

import pygame
from pydantic import ValidationError

from arcade_pong.core.game_loop import GameLoop
from arcade_pong.core.interfaces import ClockProtocol
from arcade_pong.core.interfaces import InputSourceProtocol
from arcade_pong.core.interfaces import RendererProtocol
from arcade_pong.gui.pygame_input import PygameClock
from arcade_pong.gui.pygame_input import PygameInputSource
from arcade_pong.gui.pygame_renderer import FontLoadError
from arcade_pong.gui.pygame_renderer import PygameRenderer
from arcade_pong.gui.scene import draw_frame
from arcade_pong.utils.config import KEYBOARD_LAYOUTS
from arcade_pong.utils.config import game_config
from arcade_pong.utils.config import load_config_from_file
from arcade_pong.utils.config import set_config_value
from arcade_pong.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


class StartupError(RuntimeError):
    """A collaborator required to run the game could not be created"""


def clamp_frame_time(dt: float, max_frame_time: float | None = None) -> float:
    """Keeps a frame duration in [0, MAX_FRAME_TIME] (stalled or skewed clocks)"""
    upper = max_frame_time if max_frame_time is not None else game_config.MAX_FRAME_TIME
    return max(0.0, min(upper, dt))


class ArcadePongApp:
    """Drives the game loop with a clock, an input source and a renderer"""

    def __init__(
        self,
        game: GameLoop,
        clock: ClockProtocol,
        input_source: InputSourceProtocol,
        renderer: RendererProtocol,
    ) -> None:
        self.game = game
        self.clock = clock
        self.input_source = input_source
        self.renderer = renderer
        self.frame_count = 0

    def step(self) -> bool:
        """
        Runs one frame: events, update, render

        Returns:
            bool: False when the game must stop
        """
        dt = clamp_frame_time(self.clock.elapsed_since_last_frame())

        if not self.game.handle_discrete_events(self.input_source.poll_discrete_events()):
            return False

        events = self.game.update(dt, self.input_source.held_keys())
        for goal in events["goals"]:
            logger.info("Player %d scores (%d - %d)", goal["player"], *goal["score"])

        draw_frame(self.renderer, self.game)
        self.frame_count += 1
        return True

    def run(self, max_frames: int | None = None) -> None:
        """Runs frames until quit (or until max_frames frames were drawn)"""
        while self.step():
            if max_frames is not None and self.frame_count >= max_frames:
                break
        logger.info("Game loop stopped after %d frames", self.frame_count)


def create_app() -> tuple[ArcadePongApp, PygameRenderer]:
    """
    Creates the window, font, input and clock.

    Raises:
        StartupError: If pygame, the window or the font cannot be initialized
    """
    try:
        renderer = PygameRenderer()
    except (pygame.error, OSError, FontLoadError) as e:
        pygame.quit()
        raise StartupError(str(e)) from e

    input_source = PygameInputSource()
    for player_id, controls in input_source.get_control_info().items():
        logger.info("Player %d controls: %s/%s", player_id, controls["up"], controls["down"])

    game = GameLoop(renderer.width, renderer.height)
    return ArcadePongApp(game, PygameClock(), input_source, renderer), renderer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Two-player Pong")
    parser.add_argument("--config", help="JSON configuration file")
    parser.add_argument("--layout", choices=sorted(KEYBOARD_LAYOUTS), help="Keyboard layout")
    parser.add_argument("--fps", type=int, help="Frame rate cap")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point, returns the process exit code"""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    if args.config and not load_config_from_file(args.config):
        return 1

    try:
        if args.layout:
            set_config_value(game_config, "KEYBOARD_LAYOUT", args.layout)
        if args.fps:
            set_config_value(game_config, "FPS", args.fps)
    except ValidationError as e:
        logger.error("Invalid option: %s", e)
        return 1

    try:
        app, renderer = create_app()
    except StartupError as e:
        logger.error("Startup failed: %s", e)
        return 1

    try:
        app.run()
    finally:
        renderer.cleanup()

    return 0
