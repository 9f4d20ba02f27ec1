# main.py
from __future__ import annotations
import argparse
import logging
from typing import List, Optional, Tuple

import pygame # type: ignore

from .config import WIDTH, HEIGHT, CFG, Config, RESTART
from .session import Session
from .render import draw_game, draw_game_over, hit_test

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1

# pygame key -> direction name or RESTART
KEY_BINDINGS = {
    pygame.K_UP: "up",
    pygame.K_w: "up",
    pygame.K_DOWN: "down",
    pygame.K_s: "down",
    pygame.K_LEFT: "left",
    pygame.K_a: "left",
    pygame.K_RIGHT: "right",
    pygame.K_d: "right",
    pygame.K_r: RESTART,
    pygame.K_RETURN: RESTART,
    pygame.K_KP_ENTER: RESTART,
}


def run_command(session: Session, command: Optional[str]) -> None:
    if command is None:
        return
    if command == RESTART:
        session.restart()
    else:
        session.request(command)


def handle_key(session: Session, key: int) -> None:
    run_command(session, KEY_BINDINGS.get(key))


def handle_click(session: Session, pos: Tuple[int, int]) -> None:
    run_command(session, hit_test(pos))


def handle_events(session: Session) -> bool:
    """Process events; ticks and input go through the session. Return False to quit."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type == TICK_EVENT:
            session.tick()
        elif event.type == pygame.KEYDOWN:
            handle_key(session, event.key)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            handle_click(session, event.pos)
    return True


def parse_args(argv: Optional[List[str]] = None) -> Config:
    parser = argparse.ArgumentParser(description="Grid snake")
    parser.add_argument("--seed", type=int, default=CFG.seed,
                        help="seed for food placement")
    parser.add_argument("--tick-ms", type=int, default=CFG.tick_ms,
                        help="milliseconds between moves")
    parser.add_argument("--log-level", default=CFG.log_level,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)
    return Config(seed=args.seed, tick_ms=args.tick_ms, log_level=args.log_level)


def main(argv: Optional[List[str]] = None) -> None:
    cfg = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, cfg.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    session = Session(cfg)
    pygame.time.set_timer(TICK_EVENT, cfg.tick_ms)
    logger.info("Ticking every %d ms (seed %d)", cfg.tick_ms, cfg.seed)

    running = True
    while running:
        running = handle_events(session)

        draw_game(screen, font, session.state)
        if session.state.game_over:
            draw_game_over(screen, font, session.state)
        pygame.display.flip()
        clock.tick(60)  # redraw rate; movement is driven by TICK_EVENT

    pygame.time.set_timer(TICK_EVENT, 0)
    pygame.quit()
    logger.info("Played %d game(s)", session.games_played)

if __name__ == "__main__":
    main()
