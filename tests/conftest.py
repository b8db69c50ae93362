"""
Shared fixtures. pygame is pointed at SDL's dummy drivers so the suite runs
without a display or sound card.
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from arcade_snake.config import Config, RIGHT
from arcade_snake.game import new_game_state


class ScriptedRng:
    """Stands in for numpy's Generator: hands out queued values, then the last cell."""

    def __init__(self, *values):
        self.values = list(values)

    def integers(self, high):
        if self.values:
            return self.values.pop(0)
        return high - 1


@pytest.fixture
def cfg():
    return Config(seed=7)


@pytest.fixture
def line_state(cfg):
    """Six segments on row 12, head at (12, 12) heading right; apple parked at (23, 23)."""
    body = [(12 - i, 12) for i in range(6)]
    return new_game_state(cfg, rng=ScriptedRng(), snake=body, direction=RIGHT)
