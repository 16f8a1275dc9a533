"""
PyGame keyboard input and frame clock for Arcade Pong
"""

from collections.abc import Iterable
from typing import Any

import pygame

from arcade_pong.core.controls import DiscreteEvent
from arcade_pong.core.controls import Key
from arcade_pong.utils.config import KeyboardLayout
from arcade_pong.utils.config import game_config

# KEYDOWN key -> signal, layout independent
DISCRETE_KEYS = {
    pygame.K_p: DiscreteEvent.TOGGLE_PAUSE,
    pygame.K_r: DiscreteEvent.RESTART,
    pygame.K_ESCAPE: DiscreteEvent.QUIT,
}


def build_key_mapping(layout: KeyboardLayout) -> dict[int, Key]:
    """Maps the physical movement keys of a layout to abstract keys"""
    return {
        layout.player1_keys["up"]: Key.MOVE_P1_UP,
        layout.player1_keys["down"]: Key.MOVE_P1_DOWN,
        layout.player2_keys["up"]: Key.MOVE_P2_UP,
        layout.player2_keys["down"]: Key.MOVE_P2_DOWN,
    }


def translate_event(event: pygame.event.Event) -> DiscreteEvent | None:
    """Converts a pygame event to a discrete signal, None if irrelevant"""
    if event.type == pygame.QUIT:
        return DiscreteEvent.QUIT
    if event.type == pygame.KEYDOWN:
        return DISCRETE_KEYS.get(event.key)
    return None


def translate_events(events: Iterable[pygame.event.Event]) -> list[DiscreteEvent]:
    """Converts pygame events in order, dropping irrelevant ones"""
    signals = []
    for event in events:
        signal = translate_event(event)
        if signal is not None:
            signals.append(signal)
    return signals


def held_from_pressed(pressed: Any, key_mapping: dict[int, Key]) -> set[Key]:
    """
    Collects the held movement keys.

    Args:
        pressed: Result of pygame.key.get_pressed(), indexable by key code
        key_mapping: Physical key code -> abstract key
    """
    return {key for key_code, key in key_mapping.items() if pressed[key_code]}


class PygameInputSource:
    """Reads the keyboard through pygame"""

    def __init__(self, layout: KeyboardLayout | None = None):
        self.layout = layout or game_config.get_keyboard_layout()
        self.key_mapping = build_key_mapping(self.layout)

    def held_keys(self) -> set[Key]:
        return held_from_pressed(pygame.key.get_pressed(), self.key_mapping)

    def poll_discrete_events(self) -> list[DiscreteEvent]:
        return translate_events(pygame.event.get())

    def get_control_info(self) -> dict[int, dict[str, str]]:
        """Get information about controls for each player"""
        return {
            1: self.layout.display_names.copy(),
            2: {"up": "↑", "down": "↓"},
        }


class PygameClock:
    """Frame clock capped at the configured frame rate"""

    def __init__(self, fps: int | None = None):
        self.fps = fps or game_config.FPS
        self.clock = pygame.time.Clock()

    def elapsed_since_last_frame(self) -> float:
        return self.clock.tick(self.fps) / 1000.0

