"""
PyGame renderer for Arcade Pong game
"""

import logging
from pathlib import Path

import pygame

from arcade_pong.core.interfaces.renderer import Color
from arcade_pong.utils.config import game_config

logger = logging.getLogger(__name__)

FONT_SUFFIXES = (".ttf", ".otf")


class FontLoadError(RuntimeError):
    """The configured font could not be opened"""


def load_font(name: str | None, size: int) -> pygame.font.Font:
    """
    Opens the label font.

    Args:
        name: None for pygame's bundled font, a .ttf/.otf path, or a system font name
        size: Point size

    Raises:
        FontLoadError: If the font cannot be found or opened
    """
    path: str | None
    if name is None:
        path = None
    elif Path(name).suffix.lower() in FONT_SUFFIXES:
        path = name
    else:
        path = pygame.font.match_font(name)
        if path is None:
            raise FontLoadError(f"Font not found: {name}")

    try:
        return pygame.font.Font(path, size)
    except (OSError, pygame.error) as e:
        raise FontLoadError(f"Failed to load font {name}: {e}") from e


class PygameRenderer:
    """PyGame-based renderer for Arcade Pong"""

    def __init__(self, width: int | None = None, height: int | None = None):
        """Initialize PyGame, the window and the label font"""
        self.width = width or game_config.FIELD_WIDTH
        self.height = height or game_config.FIELD_HEIGHT

        pygame.init()

        self.screen = pygame.display.set_mode((self.width, self.height), pygame.RESIZABLE)
        pygame.display.set_caption(game_config.WINDOW_TITLE)

        self.font = load_font(game_config.FONT_NAME, game_config.FONT_SIZE)
        logger.debug("Renderer ready (%dx%d)", self.width, self.height)

    def clear(self, color: Color) -> None:
        """Clear the screen with a background color"""
        self.screen.fill(color)

    def draw_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        """Draw a filled rectangle"""
        pygame.draw.rect(self.screen, color, pygame.Rect(int(x), int(y), int(width), int(height)))

    def draw_text(self, text: str, x: float, y: float, color: Color) -> None:
        """Draw a text label with its top-left corner at (x, y)"""
        text_surface = self.font.render(text, False, color)
        self.screen.blit(text_surface, (int(x), int(y)))

    def present(self) -> None:
        """Present the rendered frame"""
        pygame.display.flip()

    def cleanup(self) -> None:
        """Clean up PyGame resources"""
        pygame.quit()
