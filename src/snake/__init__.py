# src/snake/__init__.py
"""Grid snake: a pure game engine plus a pygame shell."""

from .config import GRID_SIZE, TICK_MS, DIRS, OPPOSITE
from .game import (
    GameState,
    create_initial_state,
    spawn_food,
    step,
    can_change_direction,
    request_direction,
    outcome,
)

__all__ = [
    "GRID_SIZE", "TICK_MS", "DIRS", "OPPOSITE",
    "GameState",
    "create_initial_state",
    "spawn_food",
    "step",
    "can_change_direction",
    "request_direction",
    "outcome",
]
