# main.py
import argparse
import logging
import sys

import pygame # type: ignore

from .config import WIDTH, HEIGHT, TITLE, CFG, Config
from .controls import handle_input
from .game import new_game_state, snapshot
from .loop import GameLoop
from .render import Fonts, draw_frame

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Classic Snake. Arrows/WASD to steer, R to restart.")
    p.add_argument("--seed", type=int, default=CFG.seed, help="Seed for apple placement.")
    p.add_argument("--log-level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    cfg = Config(seed=args.seed)

    try:
        pygame.init()
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(TITLE)
        fonts = Fonts()
    except pygame.error:
        logger.exception("Error initializing game window")
        pygame.quit()
        sys.exit(1)

    clock = pygame.time.Clock()
    state = new_game_state(cfg)
    loop = GameLoop(state)
    loop.start(pygame.time.get_ticks())
    logger.info("Game started (seed=%s)", cfg.seed)

    running = True
    while running:
        now = pygame.time.get_ticks()

        # 1) input
        running = handle_input(loop, now)
        if not running:
            break

        # 2) update
        loop.update(now)

        # 3) render
        draw_frame(screen, fonts, snapshot(state))
        pygame.display.flip()
        clock.tick(cfg.fps)  # movement gated inside GameLoop

    pygame.quit()

if __name__ == "__main__":
    main()
