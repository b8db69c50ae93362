# config.py
from dataclasses import dataclass
from typing import Optional, Tuple

# ----- Window & grid -----
WIDTH, HEIGHT = 600, 600
UNIT_SIZE = 25
GRID_W, GRID_H = WIDTH // UNIT_SIZE, HEIGHT // UNIT_SIZE
GAME_UNITS = GRID_W * GRID_H   # longest possible snake

TITLE = "Snake Game - Classic Arcade v1.0"

# ----- Colors -----
BG        = (0, 0, 0)
GRID_LINE = (64, 64, 64)
APPLE     = (255, 0, 0)
HEAD      = (0, 255, 0)
BODY      = (45, 180, 45)
HEAD_DARK = (0, 100, 0)
BODY_DARK = (0, 80, 0)
TEXT      = (255, 255, 255)
SPEED     = (255, 255, 0)
BANNER    = (0, 255, 255)
GAME_OVER = (255, 0, 0)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)

# ----- Tunables (what you'd tweak for difficulty) -----
@dataclass
class Config:
    seed: Optional[int] = None
    initial_delay_ms: int = 100
    min_delay_ms: int = 50
    delay_step_ms: int = 5
    apples_per_speedup: int = 10
    initial_length: int = 6
    start_cell: Tuple[int, int] = (0, 0)
    dark_mode_score: int = 50
    fps: int = 60

CFG = Config()
