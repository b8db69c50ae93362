# loop.py
from __future__ import annotations

from typing import Callable, Optional
import logging

from .game import GameState, tick, restart

logger = logging.getLogger(__name__)


class GameLoop:
    """
    Periodic timer driving the game state.

    The caller feeds it the current time (ms) from whatever clock it owns
    (pygame.time.get_ticks() in the window, plain integers in tests). At most
    one tick fires per update; the interval is read from the state every time,
    so a speed-up applies from the next interval on.
    """

    def __init__(self, state: GameState, on_redraw: Optional[Callable[[GameState], None]] = None):
        self.state = state
        self.on_redraw = on_redraw
        self.active = False
        self.last_tick = 0

    def start(self, now_ms: int) -> None:
        self.active = True
        self.last_tick = now_ms

    def stop(self) -> None:
        self.active = False

    def update(self, now_ms: int) -> bool:
        """Fire a tick if the interval has elapsed. Returns True if a tick ran."""
        if not self.active or now_ms - self.last_tick < self.state.delay_ms:
            return False

        self.last_tick = now_ms
        if not tick(self.state):
            self.stop()
        if self.on_redraw is not None:
            self.on_redraw(self.state)
        return True

    def restart(self, now_ms: int) -> bool:
        """Restart a finished game and its timer; ignored while playing."""
        if not restart(self.state):
            return False
        self.start(now_ms)
        if self.on_redraw is not None:
            self.on_redraw(self.state)
        return True
