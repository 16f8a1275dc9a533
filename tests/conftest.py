"""
Shared fixtures for Arcade Pong tests
"""

import os

import pytest

# Headless display for the renderer tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from arcade_pong.core.game_loop import GameLoop  # noqa: E402
from arcade_pong.utils.config import GameConfig  # noqa: E402
from arcade_pong.utils.config import game_config  # noqa: E402


@pytest.fixture(autouse=True)
def restore_game_config():
    """Undo any change made to the global configuration by a test"""
    saved = game_config.model_dump()
    yield
    for field_name in GameConfig.model_fields:
        object.__setattr__(game_config, field_name, saved[field_name])


@pytest.fixture
def game() -> GameLoop:
    return GameLoop(800, 600)
