# render.py
from typing import Tuple

import pygame # type: ignore

from .config import (
    WIDTH, HEIGHT, UNIT_SIZE, GRID_W, GRID_H,
    BG, GRID_LINE, APPLE, HEAD, BODY, HEAD_DARK, BODY_DARK,
    TEXT, SPEED, BANNER, GAME_OVER,
)
from .game import Snapshot, to_pixels


class Fonts:
    """The five faces used on screen. Needs pygame.font initialised."""

    def __init__(self) -> None:
        self.score = pygame.font.SysFont("inkfree", 20, bold=True)
        self.small = pygame.font.SysFont("arial", 14)
        self.final = pygame.font.SysFont("inkfree", 40, bold=True)
        self.title = pygame.font.SysFont("inkfree", 75, bold=True)
        self.hint = pygame.font.SysFont("arial", 20)


# ---------- Board ----------
def draw_cell(screen: pygame.Surface, cell: Tuple[int, int], color: Tuple[int, int, int]) -> None:
    px, py = to_pixels(cell)
    pygame.draw.rect(screen, color, pygame.Rect(px, py, UNIT_SIZE, UNIT_SIZE))

def draw_grid(screen: pygame.Surface) -> None:
    for i in range(GRID_W):
        pygame.draw.line(screen, GRID_LINE, (i * UNIT_SIZE, 0), (i * UNIT_SIZE, HEIGHT))
    for i in range(GRID_H):
        pygame.draw.line(screen, GRID_LINE, (0, i * UNIT_SIZE), (WIDTH, i * UNIT_SIZE))

def draw_apple(screen: pygame.Surface, snap: Snapshot) -> None:
    px, py = to_pixels(snap.apple)
    pygame.draw.ellipse(screen, APPLE, pygame.Rect(px, py, UNIT_SIZE, UNIT_SIZE))

def draw_snake(screen: pygame.Surface, snap: Snapshot) -> None:
    # Darker theme once the player passes the dark-mode score
    dark = snap.dark
    head_color = HEAD_DARK if dark else HEAD
    body_color = BODY_DARK if dark else BODY
    # Tail first so the head is painted on top of any stacked segments
    for cell in snap.segments[:0:-1]:
        draw_cell(screen, cell, body_color)
    draw_cell(screen, snap.head, head_color)

# ---------- Text ----------
def blit_centered(screen: pygame.Surface, font: pygame.font.Font, text: str,
                  color: Tuple[int, int, int], y: int) -> None:
    surf = font.render(text, True, color)
    screen.blit(surf, surf.get_rect(midtop=(WIDTH // 2, y)))

def draw_hud(screen: pygame.Surface, fonts: Fonts, snap: Snapshot) -> None:
    blit_centered(screen, fonts.score, f"Score: {snap.score}", TEXT, 4)

    speed = fonts.small.render(f"Speed: {snap.speed}/{snap.max_speed}", True, SPEED)
    screen.blit(speed, speed.get_rect(bottomleft=(10, HEIGHT - 10)))

    if snap.dark:
        banner = fonts.small.render("DARK MODE ACTIVATED!", True, BANNER)
        screen.blit(banner, banner.get_rect(bottomright=(WIDTH - 10, HEIGHT - 10)))

def draw_game(screen: pygame.Surface, fonts: Fonts, snap: Snapshot) -> None:
    screen.fill(BG)
    draw_grid(screen)
    draw_apple(screen, snap)
    draw_snake(screen, snap)
    draw_hud(screen, fonts, snap)

def draw_game_over(screen: pygame.Surface, fonts: Fonts, score: int) -> None:
    screen.fill(BG)
    blit_centered(screen, fonts.final, f"Final Score: {score}", GAME_OVER, 4)

    title = fonts.title.render("Game Over", True, GAME_OVER)
    screen.blit(title, title.get_rect(center=(WIDTH // 2, HEIGHT // 2)))

    blit_centered(screen, fonts.hint, "Press R to restart", TEXT, HEIGHT // 2 + 80)

def draw_frame(screen: pygame.Surface, fonts: Fonts, snap: Snapshot) -> None:
    if snap.running:
        draw_game(screen, fonts, snap)
    else:
        draw_game_over(screen, fonts, snap.score)
