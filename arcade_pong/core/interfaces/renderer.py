"""
Renderer protocol - defines interface for drawing backends
"""

from typing import Protocol

Color = tuple[int, int, int]


class RendererProtocol(Protocol):
    """
    Protocol for renderer implementations.

    The game only needs filled rectangles and text labels, so any backend
    (Pygame, headless, terminal...) can draw a frame.
    """

    def clear(self, color: Color) -> None:
        """Fill the whole surface with a background color"""
        ...

    def draw_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        """
        Draw a filled rectangle.

        Args:
            x: Left edge in pixels
            y: Top edge in pixels
            width: Width in pixels
            height: Height in pixels
            color: RGB color
        """
        ...

    def draw_text(self, text: str, x: float, y: float, color: Color) -> None:
        """Draw a text label with its top-left corner at (x, y)"""
        ...

    def present(self) -> None:
        """Show the frame drawn since the last clear"""
        ...
