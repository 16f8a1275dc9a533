"""
Protocols of the collaborators driven by the game loop
"""

from arcade_pong.core.interfaces.input import ClockProtocol
from arcade_pong.core.interfaces.input import InputSourceProtocol
from arcade_pong.core.interfaces.renderer import RendererProtocol

__all__ = ["ClockProtocol", "InputSourceProtocol", "RendererProtocol"]
