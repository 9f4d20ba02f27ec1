# game.py
from dataclasses import dataclass, replace
from typing import Callable, Optional, Sequence, Tuple
import random

from .config import GRID_SIZE, DIRS, OPPOSITE

Position = Tuple[int, int]
RandomSource = Callable[[], float]

WALL_MESSAGE = "Game over. Hit a wall."
SELF_MESSAGE = "Game over. Hit yourself."
WIN_MESSAGE = "You win. Board full."

_OUTCOMES = {
    WALL_MESSAGE: "wall",
    SELF_MESSAGE: "self",
    WIN_MESSAGE: "win",
}

# ---------- State ----------
@dataclass(frozen=True)
class GameState:
    snake: Tuple[Position, ...]         # head at index 0
    direction: str                      # direction applied on the last tick
    pending_direction: Optional[str]    # accepted input, applied on the next tick
    food: Optional[Position]            # None only when the board is full
    score: int = 0
    game_over: bool = False
    message: str = ""

    @property
    def head(self) -> Position:
        return self.snake[0]

    @property
    def effective_direction(self) -> str:
        return self.pending_direction or self.direction

# ---------- Helpers ----------
def is_opposite(a: str, b: str) -> bool:
    return OPPOSITE.get(a) == b

def in_bounds(pos: Position, grid_size: int = GRID_SIZE) -> bool:
    x, y = pos
    return 0 <= x < grid_size and 0 <= y < grid_size

def spawn_food(
    snake: Sequence[Position],
    rng: RandomSource = random.random,
    *,
    grid_size: int = GRID_SIZE,
) -> Optional[Position]:
    """
    Pick a random free cell, or None when the snake covers the whole board.
    Free cells are enumerated row-major, so a given draw always maps to the
    same cell for the same occupied set.
    """
    occupied = set(snake)
    free = [
        (x, y)
        for y in range(grid_size)
        for x in range(grid_size)
        if (x, y) not in occupied
    ]
    if not free:
        return None
    return free[int(rng() * len(free))]

def create_initial_state(
    rng: RandomSource = random.random,
    *,
    grid_size: int = GRID_SIZE,
) -> GameState:
    """Three segments on the middle row, heading right. Needs grid_size >= 5."""
    mid = grid_size // 2
    snake = (
        (mid + 1, mid),
        (mid, mid),
        (mid - 1, mid),
    )
    return GameState(
        snake=snake,
        direction="right",
        pending_direction=None,
        food=spawn_food(snake, rng, grid_size=grid_size),
    )

# ---------- Input / Update ----------
def can_change_direction(current: str, requested: str) -> bool:
    """No unknown names and no 180° turns. Keeping the same heading is fine."""
    if not isinstance(requested, str) or requested not in DIRS:
        return False
    return not is_opposite(current, requested)

def request_direction(state: GameState, requested: str) -> GameState:
    # Validate against the effective direction so two quick taps can't reverse.
    if can_change_direction(state.effective_direction, requested):
        return replace(state, pending_direction=requested)
    return state

def step(
    state: GameState,
    rng: RandomSource = random.random,
    *,
    grid_size: int = GRID_SIZE,
) -> GameState:
    """
    Advance the game by one tick.
    - Terminal states are returned as-is.
    - Wall and self collisions end the game without applying the fatal move.
    - Eating grows the snake by one and respawns food; no free cell left is a win.
    """
    if state.game_over:
        return state

    direction = state.effective_direction
    dx, dy = DIRS[direction]
    hx, hy = state.head
    next_head = (hx + dx, hy + dy)

    # Wall collision
    if not in_bounds(next_head, grid_size):
        return replace(state, game_over=True, message=WALL_MESSAGE)

    will_eat = state.food is not None and next_head == state.food

    # Move / grow
    next_snake = (next_head,) + state.snake
    if not will_eat:
        next_snake = next_snake[:-1]

    # Self collision, checked against the body after the tail has moved
    if next_head in next_snake[1:]:
        return replace(state, game_over=True, message=SELF_MESSAGE)

    next_food = state.food
    next_score = state.score
    if will_eat:
        next_score += 1
        next_food = spawn_food(next_snake, rng, grid_size=grid_size)
        if next_food is None:
            return replace(
                state,
                snake=next_snake,
                food=None,
                score=next_score,
                game_over=True,
                message=WIN_MESSAGE,
            )

    return replace(
        state,
        snake=next_snake,
        direction=direction,
        pending_direction=None,
        food=next_food,
        score=next_score,
    )

def outcome(state: GameState) -> str:
    """One of 'active', 'wall', 'self' or 'win'."""
    if not state.game_over:
        return "active"
    return _OUTCOMES.get(state.message, "over")
