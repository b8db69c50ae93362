"""
Tests for the tick timer.
"""

from arcade_snake.config import LEFT
from arcade_snake.game import new_game_state
from arcade_snake.loop import GameLoop

from conftest import ScriptedRng


class TestGameLoop:

    def test_idle_until_started(self, line_state):
        loop = GameLoop(line_state)
        assert not loop.update(1_000)
        assert line_state.head == (12, 12)

    def test_ticks_once_per_interval(self, line_state):
        loop = GameLoop(line_state)
        loop.start(0)

        assert not loop.update(99)
        assert loop.update(100)
        assert line_state.head == (13, 12)

        # A late frame still fires a single tick
        assert loop.update(450)
        assert line_state.head == (14, 12)
        assert not loop.update(500)

    def test_redraw_signalled_after_tick(self, line_state):
        seen = []
        loop = GameLoop(line_state, on_redraw=lambda s: seen.append(s.head))
        loop.start(0)

        loop.update(50)
        loop.update(100)
        assert seen == [(13, 12)]

    def test_interval_follows_speed(self, line_state):
        loop = GameLoop(line_state)
        loop.start(0)
        line_state.delay_ms = 60

        assert loop.update(60)

    def test_stops_on_game_over(self, cfg):
        state = new_game_state(cfg, rng=ScriptedRng(), snake=[(0, 3), (1, 3)], direction=LEFT)
        loop = GameLoop(state)
        loop.start(0)

        assert loop.update(100)
        assert not state.running
        assert not loop.active
        assert not loop.update(1_000)

    def test_restart_only_after_game_over(self, cfg):
        state = new_game_state(cfg, rng=ScriptedRng(), snake=[(0, 3), (1, 3)], direction=LEFT)
        loop = GameLoop(state)
        loop.start(0)
        assert not loop.restart(10)

        loop.update(100)
        assert loop.restart(500)
        assert loop.active
        assert state.running
        assert not loop.update(599)
        assert loop.update(600)
        assert state.head == (1, 0)
