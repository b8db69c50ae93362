# game.py
from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from itertools import islice
from typing import Deque, Iterable, Optional, Tuple
import logging

import numpy as np  # type: ignore

from .config import GRID_W, GRID_H, GAME_UNITS, UNIT_SIZE, RIGHT, CFG, Config

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]

# ---------- Helpers ----------
def spawn_apple(rng: np.random.Generator, grid_w: int = GRID_W, grid_h: int = GRID_H) -> Cell:
    """Pick a uniformly random cell, each axis drawn independently.

    The snake's body is not avoided: an apple can land under the snake.
    """
    return (int(rng.integers(grid_w)), int(rng.integers(grid_h)))

def is_opposite(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]

def in_bounds(cell: Cell) -> bool:
    x, y = cell
    return 0 <= x < GRID_W and 0 <= y < GRID_H

def to_pixels(cell: Cell) -> Tuple[int, int]:
    """Top-left pixel of a grid cell."""
    return (cell[0] * UNIT_SIZE, cell[1] * UNIT_SIZE)

# ---------- State ----------
@dataclass
class GameState:
    snake: Deque[Cell]              # head at index 0
    direction: Tuple[int, int]      # heading used by the last tick
    pending: Tuple[int, int]        # heading for the next tick
    apple: Cell
    apples_eaten: int
    delay_ms: int                   # current tick interval
    running: bool
    cfg: Config = field(default_factory=Config)
    rng: np.random.Generator = field(default_factory=np.random.default_rng, repr=False)
    vacated: Optional[Cell] = None  # cell the tail left on the last tick

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def length(self) -> int:
        return len(self.snake)


@dataclass(frozen=True)
class Snapshot:
    """Read-only view handed to the renderer each frame."""
    segments: Tuple[Cell, ...]
    apple: Cell
    score: int
    running: bool
    delay_ms: int
    speed: int       # HUD speed, see speed_level()
    max_speed: int
    dark: bool       # darker theme unlocked

    @property
    def head(self) -> Cell:
        return self.segments[0]


def new_game_state(
    cfg: Config = CFG,
    rng: Optional[np.random.Generator] = None,
    snake: Optional[Iterable[Cell]] = None,
    direction: Tuple[int, int] = RIGHT,
) -> GameState:
    """
    Build a running game with one apple placed.
    By default every segment starts stacked on cfg.start_cell; pass `snake`
    (head first) to start from an explicit body instead.
    """
    if rng is None:
        rng = np.random.default_rng(cfg.seed)
    if snake is None:
        snake = [cfg.start_cell] * cfg.initial_length
    state = GameState(
        snake=deque(snake),
        direction=direction,
        pending=direction,
        apple=spawn_apple(rng),
        apples_eaten=0,
        delay_ms=cfg.initial_delay_ms,
        running=True,
        cfg=cfg,
        rng=rng,
    )
    return state

# ---------- Transitions ----------
def set_direction(state: GameState, direction: Tuple[int, int]) -> bool:
    """Queue a heading for the next tick; 180° turns are refused. Returns True if accepted.

    Turns are checked against the heading the snake actually moved in on the
    last tick, not against an earlier key still waiting in `pending`. So Up
    then Down between two ticks while moving right ends up heading down.
    """
    if is_opposite(direction, state.direction):
        return False
    state.pending = direction
    return True

def tick(state: GameState) -> bool:
    """
    Advance the game by one step: move, eat, then check collisions.
    Returns True while the game is still running.
    """
    if not state.running:
        return False

    # Commit direction once per tick
    state.direction = state.pending

    # Each segment takes the cell of the one ahead of it; the head steps forward.
    hx, hy = state.snake[0]
    dx, dy = state.direction
    state.snake.appendleft((hx + dx, hy + dy))
    state.vacated = state.snake.pop()

    if state.snake[0] == state.apple:
        _eat_apple(state)

    if _collided(state):
        state.running = False
        logger.info("Game over: score=%d length=%d", state.apples_eaten, state.length)
    return state.running

def restart(state: GameState) -> bool:
    """Reset a finished game in place. Does nothing while a game is running."""
    if state.running:
        return False
    cfg = state.cfg
    state.snake.clear()
    state.snake.extend([cfg.start_cell] * cfg.initial_length)
    state.vacated = None
    state.apples_eaten = 0
    state.direction = state.pending = RIGHT
    state.delay_ms = cfg.initial_delay_ms
    state.apple = spawn_apple(state.rng)
    state.running = True
    logger.info("Game restarted")
    return True

def _eat_apple(state: GameState) -> None:
    cfg = state.cfg
    # The new tail segment keeps the cell the old tail just left.
    if state.length < GAME_UNITS:
        state.snake.append(state.vacated)
    state.apples_eaten += 1
    state.apple = spawn_apple(state.rng)
    logger.debug("Apple eaten: score=%d, next apple at %s", state.apples_eaten, state.apple)

    if state.apples_eaten % cfg.apples_per_speedup == 0 and state.delay_ms > cfg.min_delay_ms:
        state.delay_ms = max(cfg.min_delay_ms, state.delay_ms - cfg.delay_step_ms)
        logger.info("Speed up: delay=%dms at score %d", state.delay_ms, state.apples_eaten)

def _collided(state: GameState) -> bool:
    head = state.snake[0]
    if not in_bounds(head):
        return True
    # Only live segments count: the cell the tail left this tick is free.
    return head in islice(state.snake, 1, None)

# ---------- Read-only views ----------
def snapshot(state: GameState) -> Snapshot:
    return Snapshot(
        segments=tuple(state.snake),
        apple=state.apple,
        score=state.apples_eaten,
        running=state.running,
        delay_ms=state.delay_ms,
        speed=speed_level(state),
        max_speed=state.cfg.initial_delay_ms,
        dark=dark_mode(state),
    )

def speed_level(state: GameState) -> int:
    """Speed shown in the HUD: grows from min_delay_ms up to initial_delay_ms as delay drops."""
    cfg = state.cfg
    return cfg.initial_delay_ms - state.delay_ms + cfg.min_delay_ms

def dark_mode(state: GameState) -> bool:
    return state.apples_eaten >= state.cfg.dark_mode_score
