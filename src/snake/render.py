# render.py
from typing import Dict, Optional, Tuple

import numpy as np  # type: ignore
import pygame  # type: ignore

from .config import (
    GRID_SIZE, CELL_SIZE, WIDTH, HEIGHT, STATUS_H,
    BUTTON_W, BUTTON_H, BUTTON_GAP, CONTROLS,
    BG, GRID, GREEN, HEAD, RED, TEXT, BUTTON,
)
from .game import GameState

# Cell codes used by cell_grid()
EMPTY, SNAKE, HEAD_CELL, FOOD = 0, 1, 2, 3

_CELL_COLORS = {
    SNAKE: GREEN,
    HEAD_CELL: HEAD,
    FOOD: RED,
}

_CELL_CHARS = {
    EMPTY: ".",
    SNAKE: "o",
    HEAD_CELL: "@",
    FOOD: "*",
}

# ---------- Snapshot -> grid ----------
def cell_grid(state: GameState, grid_size: int = GRID_SIZE) -> np.ndarray:
    """
    Return a (grid_size, grid_size) int8 array indexed [y, x].

    Cells hold EMPTY, SNAKE, HEAD_CELL or FOOD. Segments outside the board
    are skipped rather than wrapped.
    """
    grid = np.full((grid_size, grid_size), EMPTY, dtype=np.int8)

    if state.food is not None:
        fx, fy = state.food
        if 0 <= fx < grid_size and 0 <= fy < grid_size:
            grid[fy, fx] = FOOD

    # Tail first so the head wins if anything overlaps
    for index in range(len(state.snake) - 1, -1, -1):
        x, y = state.snake[index]
        if not (0 <= x < grid_size and 0 <= y < grid_size):
            continue
        grid[y, x] = HEAD_CELL if index == 0 else SNAKE

    return grid

def board_text(state: GameState, grid_size: int = GRID_SIZE) -> str:
    grid = cell_grid(state, grid_size)
    return "\n".join("".join(_CELL_CHARS[int(c)] for c in row) for row in grid)

def status_text(state: GameState) -> str:
    if not state.game_over:
        return ""
    return f"{state.message} Press Restart."

# ---------- Buttons ----------
def control_rects() -> Dict[str, pygame.Rect]:
    """Button rects along the bottom of the status bar, keyed by command."""
    top = HEIGHT - BUTTON_H - 8
    return {
        command: pygame.Rect(8 + i * (BUTTON_W + BUTTON_GAP), top, BUTTON_W, BUTTON_H)
        for i, command in enumerate(CONTROLS)
    }

def hit_test(pos: Tuple[int, int]) -> Optional[str]:
    for command, rect in control_rects().items():
        if rect.collidepoint(pos):
            return command
    return None

# ---------- Draw ----------
def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int]) -> None:
    rect = pygame.Rect(gx * CELL_SIZE, gy * CELL_SIZE, CELL_SIZE, CELL_SIZE)
    pygame.draw.rect(screen, color, rect)

def draw_game(screen: pygame.Surface, font: pygame.font.Font, state: GameState) -> None:
    screen.fill(BG)

    grid = cell_grid(state)
    for gy, gx in np.argwhere(grid == EMPTY).tolist():
        pygame.draw.rect(
            screen,
            GRID,
            pygame.Rect(gx * CELL_SIZE, gy * CELL_SIZE, CELL_SIZE, CELL_SIZE),
            width=1,
        )
    for code, color in _CELL_COLORS.items():
        for gy, gx in np.argwhere(grid == code).tolist():
            draw_cell(screen, gx, gy, color)

    # score + status bar under the board
    bar_y = HEIGHT - STATUS_H + 6
    txt = font.render(f"Score: {state.score}", True, TEXT)
    screen.blit(txt, (8, bar_y))
    status = status_text(state)
    if status:
        st = font.render(status, True, TEXT)
        screen.blit(st, st.get_rect(topright=(WIDTH - 8, bar_y)))

    draw_controls(screen, font)

def draw_controls(screen: pygame.Surface, font: pygame.font.Font) -> None:
    for command, rect in control_rects().items():
        pygame.draw.rect(screen, BUTTON, rect, border_radius=4)
        label = font.render(command.capitalize(), True, TEXT)
        screen.blit(label, label.get_rect(center=rect.center))

def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, state: GameState) -> None:
    # Dim the board with a translucent overlay
    overlay = pygame.Surface((WIDTH, HEIGHT - STATUS_H), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (0, 0))

    center_y = (HEIGHT - STATUS_H) // 2
    title = font.render(state.message, True, (240, 240, 250))
    sub   = font.render("Press R or Enter to restart", True, TEXT)
    sco   = font.render(f"Score: {state.score}", True, TEXT)

    screen.blit(title, title.get_rect(center=(WIDTH // 2, center_y - 16)))
    screen.blit(sub, sub.get_rect(center=(WIDTH // 2, center_y + 16)))
    screen.blit(sco, sco.get_rect(center=(WIDTH // 2, center_y + 44)))
