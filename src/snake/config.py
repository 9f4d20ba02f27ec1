from dataclasses import dataclass

# ----- Board -----
GRID_SIZE = 20
TICK_MS = 140

# ----- Window -----
CELL_SIZE = 24
STATUS_H = 72
BUTTON_W, BUTTON_H, BUTTON_GAP = 64, 28, 8
WIDTH, HEIGHT = GRID_SIZE * CELL_SIZE, GRID_SIZE * CELL_SIZE + STATUS_H

# ----- Colors -----
BG    = (20, 20, 24)
GRID  = (32, 32, 38)
GREEN = (80, 200, 80)
HEAD  = (150, 240, 120)
RED   = (200, 70, 70)
TEXT  = (220, 220, 230)
BUTTON = (52, 52, 64)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)

DIRS = {
    "up": UP,
    "down": DOWN,
    "left": LEFT,
    "right": RIGHT,
}

OPPOSITE = {
    "up": "down",
    "down": "up",
    "left": "right",
    "right": "left",
}

RESTART = "restart"

# On-screen buttons, left to right
CONTROLS = ["up", "down", "left", "right", RESTART]

# ----- Tunables -----
@dataclass
class Config:
    seed: int = 0
    tick_ms: int = TICK_MS
    log_level: str = "INFO"

CFG = Config()
