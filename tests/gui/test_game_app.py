"""
Tests for the frame loop and the entry point
"""

import json

import pytest

from arcade_pong.core.controls import DiscreteEvent, Key
from arcade_pong.core.entities import RoundState
from arcade_pong.core.game_loop import GameLoop
from arcade_pong.gui import game_app
from arcade_pong.gui.game_app import ArcadePongApp, StartupError, clamp_frame_time, main
from arcade_pong.utils.config import game_config

from fakes import FakeClock, FakeInput, FakeRenderer


def make_app(frames=None, held=None, dt=0.01):
    renderer = FakeRenderer()
    app = ArcadePongApp(GameLoop(800, 600), FakeClock(dt), FakeInput(frames, held), renderer)
    return app, renderer


class TestClampFrameTime:
    """Test frame duration hardening"""

    def test_normal_value_unchanged(self):
        assert clamp_frame_time(0.016) == 0.016

    def test_negative_becomes_zero(self):
        assert clamp_frame_time(-1.0) == 0.0

    def test_stall_is_capped(self):
        assert clamp_frame_time(30.0) == game_config.MAX_FRAME_TIME

    def test_explicit_cap(self):
        assert clamp_frame_time(1.0, max_frame_time=0.5) == 0.5


class TestArcadePongApp:
    """Test the frame loop with fake collaborators"""

    def test_step_updates_and_renders(self):
        app, renderer = make_app(held={Key.MOVE_P1_UP})
        assert app.step() is True
        assert app.game.ball.position.x == pytest.approx(404.0)
        assert app.game.player1.position.y == pytest.approx(246.0)
        assert renderer.calls[0][0] == "clear"
        assert renderer.calls[-1] == ("present",)
        assert app.frame_count == 1

    def test_stalled_clock_is_clamped(self):
        app, _ = make_app(dt=10.0)
        app.step()
        # 0.25 s at 400 px/s
        assert app.game.ball.position.x == pytest.approx(500.0)

    def test_quit_stops_without_rendering(self):
        app, renderer = make_app(frames=[[DiscreteEvent.QUIT]])
        assert app.step() is False
        assert renderer.calls == []
        assert app.game.running is False

    def test_run_until_quit(self):
        frames = [[], [DiscreteEvent.TOGGLE_PAUSE], [], [DiscreteEvent.QUIT]]
        app, renderer = make_app(frames=frames)
        app.run()
        assert app.frame_count == 3
        assert app.game.state == RoundState.PAUSED
        assert renderer.calls.count(("present",)) == 3

    def test_run_max_frames(self):
        app, _ = make_app()
        app.run(max_frames=5)
        assert app.frame_count == 5
        assert app.game.ball.position.x == pytest.approx(420.0)

    def test_goal_is_logged(self, caplog):
        app, _ = make_app()
        app.game.ball.move_to(795, 100)
        with caplog.at_level("INFO", logger="arcade_pong"):
            app.step()
        assert app.game.score.to_tuple() == (1, 0)
        assert "Player 1 scores (1 - 0)" in caplog.text


class TestMain:
    """Test the entry point and its exit codes"""

    def test_normal_quit_returns_zero(self, monkeypatch):
        app, renderer = make_app(frames=[[], [DiscreteEvent.QUIT]])
        monkeypatch.setattr(game_app, "create_app", lambda: (app, renderer))

        assert main([]) == 0
        assert app.frame_count == 1
        assert renderer.cleaned_up is True

    def test_startup_failure_returns_one(self, monkeypatch, caplog):
        def failing_create_app():
            raise StartupError("Font not found: nope")

        monkeypatch.setattr(game_app, "create_app", failing_create_app)

        assert main([]) == 1
        assert "Font not found" in caplog.text

    def test_renderer_cleaned_up_on_crash(self, monkeypatch):
        app, renderer = make_app()

        def crash():
            raise RuntimeError("boom")

        monkeypatch.setattr(app, "step", crash)
        monkeypatch.setattr(game_app, "create_app", lambda: (app, renderer))

        with pytest.raises(RuntimeError):
            main([])
        assert renderer.cleaned_up is True

    def test_missing_config_returns_one(self, tmp_path):
        assert main(["--config", str(tmp_path / "missing.json")]) == 1

    def test_config_and_options_applied(self, monkeypatch, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"WIN_SCORE": 3}))
        app, renderer = make_app(frames=[[DiscreteEvent.QUIT]])
        monkeypatch.setattr(game_app, "create_app", lambda: (app, renderer))

        assert main(["--config", str(config_file), "--layout", "azerty", "--fps", "30"]) == 0
        assert game_config.WIN_SCORE == 3
        assert game_config.KEYBOARD_LAYOUT == "azerty"
        assert game_config.FPS == 30

    def test_invalid_fps_returns_one(self):
        assert main(["--fps", "-5"]) == 1
        assert game_config.FPS == 60
