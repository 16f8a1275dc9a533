"""
Arcade Pong game configuration with Pydantic validation
"""

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pygame
from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationError
from pydantic import field_validator
from pydantic import model_validator

logger = logging.getLogger(__name__)

Color = tuple[int, int, int]


@dataclass
class KeyboardLayout:
    """Physical keys used by each player for a keyboard layout"""

    name: str
    player1_keys: dict[str, int]
    player2_keys: dict[str, int]
    display_names: dict[str, str]


_ARROW_KEYS = {"up": pygame.K_UP, "down": pygame.K_DOWN}

KEYBOARD_LAYOUTS = {
    "qwerty": KeyboardLayout(
        name="QWERTY",
        player1_keys={"up": pygame.K_w, "down": pygame.K_s},
        player2_keys=_ARROW_KEYS,
        display_names={"up": "W", "down": "S"},
    ),
    "azerty": KeyboardLayout(
        name="AZERTY",
        player1_keys={"up": pygame.K_z, "down": pygame.K_s},  # Z instead of W
        player2_keys=_ARROW_KEYS,
        display_names={"up": "Z", "down": "S"},
    ),
    "qwertz": KeyboardLayout(
        name="QWERTZ",
        player1_keys={"up": pygame.K_w, "down": pygame.K_s},
        player2_keys=_ARROW_KEYS,
        display_names={"up": "W", "down": "S"},
    ),
}


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation"""

    model_config = {"validate_assignment": True}

    # Field dimensions
    FIELD_WIDTH: int = Field(default=800, gt=0, description="Field width in pixels")
    FIELD_HEIGHT: int = Field(default=600, gt=0, description="Field height in pixels")

    # Player paddles
    PADDLE_WIDTH: float = Field(default=20.0, gt=0, description="Paddle width in pixels")
    PADDLE_HEIGHT: float = Field(default=100.0, gt=0, description="Paddle height in pixels")
    PADDLE_MARGIN: float = Field(default=50.0, ge=0, description="Paddle margin from edge")
    PADDLE_SPEED: float = Field(default=400.0, gt=0, description="Paddle speed in pixels/s")

    # Ball physics
    BALL_SIZE: float = Field(default=15.0, gt=0, description="Ball side in pixels")
    BALL_SPEED: float = Field(default=400.0, gt=0, description="Base ball speed")
    BALL_VELOCITY: float = Field(default=4.0, gt=0, description="Velocity component magnitude")
    SPEED_DIVISOR: float = Field(default=4.0, gt=0, description="Ball speed calibration divisor")
    BALL_SPEED_INCREMENT: float = Field(default=50.0, ge=0, description="Speed gain per hit")

    # Gameplay
    WIN_SCORE: int = Field(default=5, gt=0, description="Winning score")
    POPUP_DURATION: float = Field(default=1.0, gt=0, description="Score popup duration (s)")

    # Loop
    FPS: int = Field(default=60, gt=0, description="Frames per second")
    MAX_FRAME_TIME: float = Field(default=0.25, gt=0, description="Largest accepted frame dt")

    # Keyboard layout
    KEYBOARD_LAYOUT: str = Field(default="qwerty", description="Keyboard layout name")

    # Display
    WINDOW_TITLE: str = Field(default="Pong", description="Window caption")
    FONT_NAME: str | None = Field(default=None, description="Font name or path, None = default")
    FONT_SIZE: int = Field(default=28, gt=0, description="Font size in points")
    BACKGROUND_COLOR: Color = Field(default=(20, 25, 45), description="RGB color")
    DIVIDER_COLOR: Color = Field(default=(80, 80, 120), description="RGB color")
    PLAYER1_COLOR: Color = Field(default=(255, 180, 80), description="RGB color")
    PLAYER2_COLOR: Color = Field(default=(100, 200, 255), description="RGB color")
    BALL_COLOR: Color = Field(default=(255, 255, 255), description="RGB color")
    TEXT_COLOR: Color = Field(default=(255, 255, 255), description="RGB color")
    WIN_TEXT_COLOR: Color = Field(default=(0, 255, 120), description="RGB color")
    PAUSE_TEXT_COLOR: Color = Field(default=(255, 255, 100), description="RGB color")

    @field_validator("KEYBOARD_LAYOUT")
    @classmethod
    def validate_keyboard_layout(cls, v: str) -> str:
        """Validate keyboard layout exists"""
        if v not in KEYBOARD_LAYOUTS:
            raise ValueError(
                f"Unknown keyboard layout '{v}'. Available: {list(KEYBOARD_LAYOUTS.keys())}"
            )
        return v

    @field_validator(
        "BACKGROUND_COLOR",
        "DIVIDER_COLOR",
        "PLAYER1_COLOR",
        "PLAYER2_COLOR",
        "BALL_COLOR",
        "TEXT_COLOR",
        "WIN_TEXT_COLOR",
        "PAUSE_TEXT_COLOR",
    )
    @classmethod
    def validate_color(cls, v: Color) -> Color:
        """Validate RGB channels are in 0-255"""
        if any(channel < 0 or channel > 255 for channel in v):
            raise ValueError(f"Color channels must be in [0, 255], got {v}")
        return v

    @model_validator(mode="after")
    def validate_field_dimensions(self) -> "GameConfig":
        """Validate field is large enough for game elements"""
        min_width = 2 * (self.PADDLE_MARGIN + self.PADDLE_WIDTH) + self.BALL_SIZE
        if self.FIELD_WIDTH < min_width:
            raise ValueError(f"FIELD_WIDTH must be at least {min_width} pixels")

        min_height = max(self.PADDLE_HEIGHT, self.BALL_SIZE)
        if self.FIELD_HEIGHT < min_height:
            raise ValueError(f"FIELD_HEIGHT must be at least {min_height} pixels")

        return self

    def get_keyboard_layout(self) -> KeyboardLayout:
        """Get the current keyboard layout configuration"""
        return KEYBOARD_LAYOUTS[self.KEYBOARD_LAYOUT]

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump()

    def save_to_file(self, filepath: str = "arcade_pong_config.json") -> None:
        """Save configuration to a JSON file"""
        with open(Path(filepath), "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str = "arcade_pong_config.json") -> "GameConfig":
        """Load configuration from a JSON file"""
        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path) as f:
            config_dict = json.load(f)

        return cls(**config_dict)

    def reset_to_defaults(self) -> None:
        """Reset all fields to their default values"""
        defaults = GameConfig()
        for field_name in type(self).model_fields:
            object.__setattr__(self, field_name, getattr(defaults, field_name))


# Global configuration instance
game_config = GameConfig()


def load_config_from_file(filepath: str = "arcade_pong_config.json") -> bool:
    """Load configuration from file into global game_config"""
    try:
        loaded_config = GameConfig.load_from_file(filepath)
    except FileNotFoundError:
        logger.warning("Configuration file not found: %s", filepath)
        return False
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        logger.error("Error loading config %s: %s", filepath, e)
        return False

    # loaded_config is already validated as a whole
    for field_name in GameConfig.model_fields:
        object.__setattr__(game_config, field_name, getattr(loaded_config, field_name))
    logger.info("Loaded configuration from %s", filepath)
    return True


def set_config_value(obj: BaseModel, name: str, value: Any) -> None:
    """Assigns a validated value, keeping the previous one if validation fails"""
    old_value = getattr(obj, name)
    try:
        setattr(obj, name, value)
    except ValidationError:
        # Model validators run after the value is stored
        object.__setattr__(obj, name, old_value)
        raise


def _change_values(obj: BaseModel, old_values: dict[str, Any], **kwargs: Any) -> None:
    """Helper to change config values temporarily, recording each previous value"""
    for name, new_value in kwargs.items():
        old_values.setdefault(name, getattr(obj, name))
        set_config_value(obj, name, new_value)


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    old_values: dict[str, Any] = {}
    try:
        _change_values(game_config, old_values, **kwargs)
        yield
    finally:
        # Previous values were valid together, restore them as a whole
        for name, old_value in old_values.items():
            object.__setattr__(game_config, name, old_value)
