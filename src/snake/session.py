# session.py
from __future__ import annotations

import logging
import random

from .config import CFG, Config, GRID_SIZE
from .game import GameState, create_initial_state, outcome, request_direction, step

logger = logging.getLogger(__name__)


class Session:
    """
    Owns the one live GameState for a window.

    The core functions never mutate anything; this is the single writer that
    swaps in the value they return. Input handlers and the tick timer must
    both go through the same Session.
    """

    def __init__(self, cfg: Config = CFG, grid_size: int = GRID_SIZE):
        self.cfg = cfg
        self.grid_size = grid_size
        self.rng = random.Random(cfg.seed)
        self.games_played = 0
        self.state: GameState = self._new_state()

    def _new_state(self) -> GameState:
        self.games_played += 1
        state = create_initial_state(self.rng.random, grid_size=self.grid_size)
        logger.info("Game %d started, food at %s", self.games_played, state.food)
        return state

    def request(self, direction: str) -> bool:
        """Queue a direction change. Returns False if it was ignored."""
        before = self.state
        self.state = request_direction(before, direction)
        accepted = self.state is not before
        if not accepted:
            logger.debug(
                "Ignored direction %r (moving %s)", direction, before.effective_direction
            )
        return accepted

    def tick(self) -> GameState:
        before = self.state
        self.state = step(before, self.rng.random, grid_size=self.grid_size)
        if self.state.score != before.score:
            logger.debug("Ate food, score %d", self.state.score)
        if self.state.game_over and not before.game_over:
            logger.info(
                "Game %d ended (%s) with score %d",
                self.games_played, outcome(self.state), self.state.score,
            )
        return self.state

    def restart(self) -> GameState:
        self.state = self._new_state()
        return self.state
