"""
Tests for the pygame input translation
"""

from collections import defaultdict

import pygame

from arcade_pong.core.controls import DiscreteEvent, Key
from arcade_pong.gui.pygame_input import (
    PygameClock,
    PygameInputSource,
    build_key_mapping,
    held_from_pressed,
    translate_event,
    translate_events,
)
from arcade_pong.utils.config import KEYBOARD_LAYOUTS, game_config, game_config_tmp


def keydown(key: int) -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def pressed(*keys: int) -> defaultdict:
    state: defaultdict = defaultdict(bool)
    for key in keys:
        state[key] = True
    return state


class TestTranslateEvent:
    """Test pygame event -> discrete signal conversion"""

    def test_window_close_is_quit(self):
        assert translate_event(pygame.event.Event(pygame.QUIT)) == DiscreteEvent.QUIT

    def test_escape_is_quit(self):
        assert translate_event(keydown(pygame.K_ESCAPE)) == DiscreteEvent.QUIT

    def test_pause_and_restart_keys(self):
        assert translate_event(keydown(pygame.K_p)) == DiscreteEvent.TOGGLE_PAUSE
        assert translate_event(keydown(pygame.K_r)) == DiscreteEvent.RESTART

    def test_key_release_is_ignored(self):
        assert translate_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_p)) is None

    def test_other_keys_are_ignored(self):
        assert translate_event(keydown(pygame.K_w)) is None

    def test_order_is_kept(self):
        events = [
            keydown(pygame.K_r),
            keydown(pygame.K_a),
            keydown(pygame.K_p),
            pygame.event.Event(pygame.QUIT),
        ]
        assert translate_events(events) == [
            DiscreteEvent.RESTART,
            DiscreteEvent.TOGGLE_PAUSE,
            DiscreteEvent.QUIT,
        ]


class TestHeldKeys:
    """Test held key sampling for each layout"""

    def test_qwerty(self):
        mapping = build_key_mapping(KEYBOARD_LAYOUTS["qwerty"])
        held = held_from_pressed(pressed(pygame.K_w, pygame.K_DOWN), mapping)
        assert held == {Key.MOVE_P1_UP, Key.MOVE_P2_DOWN}

    def test_azerty_uses_z(self):
        mapping = build_key_mapping(KEYBOARD_LAYOUTS["azerty"])
        assert held_from_pressed(pressed(pygame.K_z), mapping) == {Key.MOVE_P1_UP}
        assert held_from_pressed(pressed(pygame.K_w), mapping) == set()

    def test_nothing_held(self):
        mapping = build_key_mapping(KEYBOARD_LAYOUTS["qwerty"])
        assert held_from_pressed(pressed(), mapping) == set()

    def test_input_source_follows_config_layout(self):
        with game_config_tmp(KEYBOARD_LAYOUT="azerty"):
            source = PygameInputSource()
        assert source.layout.name == "AZERTY"
        assert source.get_control_info()[1] == {"up": "Z", "down": "S"}


class TestPygameClock:
    """Test the frame clock"""

    def test_fps_from_config(self):
        assert PygameClock().fps == game_config.FPS
        assert PygameClock(fps=30).fps == 30

    def test_elapsed_is_non_negative(self):
        clock = PygameClock(fps=1000)
        assert clock.elapsed_since_last_frame() >= 0.0
