"""Classic Snake arcade game."""

from arcade_snake.game import GameState, new_game_state, set_direction, tick, restart
from arcade_snake.loop import GameLoop

__all__ = ["GameState", "new_game_state", "set_direction", "tick", "restart", "GameLoop"]
