"""
Utility module of Arcade Pong
"""

from arcade_pong.utils.config import GameConfig
from arcade_pong.utils.config import game_config
from arcade_pong.utils.config import game_config_tmp
from arcade_pong.utils.logging_config import setup_logging

__all__ = ["game_config", "game_config_tmp", "GameConfig", "setup_logging"]
