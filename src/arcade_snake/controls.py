# controls.py
from typing import Dict, Tuple

import pygame # type: ignore

from .config import UP, DOWN, LEFT, RIGHT
from .game import set_direction
from .loop import GameLoop

# Arrow keys and WASD both steer
KEY_BINDINGS: Dict[int, Tuple[int, int]] = {
    pygame.K_UP: UP,       pygame.K_w: UP,
    pygame.K_DOWN: DOWN,   pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT,   pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT, pygame.K_d: RIGHT,
}
RESTART_KEY = pygame.K_r


def handle_key(loop: GameLoop, key: int, now_ms: int) -> None:
    """Route one key press to a direction change or a restart; other keys are ignored."""
    if key in KEY_BINDINGS:
        set_direction(loop.state, KEY_BINDINGS[key])
    elif key == RESTART_KEY:
        loop.restart(now_ms)

def handle_input(loop: GameLoop, now_ms: int) -> bool:
    """Process events. Return False to quit."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            handle_key(loop, event.key, now_ms)
    return True
