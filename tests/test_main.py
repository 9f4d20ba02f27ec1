"""
Tests for the input wiring and CLI in src/snake/main.py.
"""

import random

import pygame
import pytest

from snake.config import CFG, Config
from snake.game import create_initial_state
from snake.main import KEY_BINDINGS, RESTART, handle_click, handle_key, parse_args
from snake.render import control_rects
from snake.session import Session


@pytest.mark.parametrize(
    "key, direction",
    [
        (pygame.K_UP, "up"),
        (pygame.K_w, "up"),
        (pygame.K_DOWN, "down"),
        (pygame.K_s, "down"),
        (pygame.K_d, "right"),
    ],
)
def test_direction_keys(key, direction):
    session = Session(Config(seed=0))
    handle_key(session, key)
    assert session.state.pending_direction == direction


def test_reverse_key_ignored():
    session = Session(Config(seed=0))
    handle_key(session, pygame.K_LEFT)
    handle_key(session, pygame.K_a)
    assert session.state.pending_direction is None


def second_game(seed):
    """The state a seeded session installs on its first restart."""
    rng = random.Random(seed)
    create_initial_state(rng.random)
    return create_initial_state(rng.random)


@pytest.mark.parametrize("key", [pygame.K_r, pygame.K_RETURN])
def test_restart_keys(key):
    assert KEY_BINDINGS[key] == RESTART
    session = Session(Config(seed=0))
    session.request("up")
    before_restart = session.state

    handle_key(session, key)

    assert session.state is not before_restart
    assert session.state == second_game(0)
    assert session.games_played == 2


def test_unbound_key_is_noop():
    session = Session(Config(seed=0))
    before = session.state
    handle_key(session, pygame.K_SPACE)
    assert session.state is before


def test_parse_args_defaults():
    assert parse_args([]) == CFG


def test_parse_args_overrides():
    cfg = parse_args(["--seed", "9", "--tick-ms", "80", "--log-level", "DEBUG"])
    assert cfg == Config(seed=9, tick_ms=80, log_level="DEBUG")


def test_parse_args_rejects_bad_level():
    with pytest.raises(SystemExit):
        parse_args(["--log-level", "LOUD"])


@pytest.mark.parametrize("direction", ["up", "down"])
def test_click_direction_button(direction):
    session = Session(Config(seed=0))
    handle_click(session, control_rects()[direction].center)
    assert session.state.pending_direction == direction


def test_click_reverse_button_ignored():
    session = Session(Config(seed=0))
    before = session.state
    handle_click(session, control_rects()["left"].center)
    assert session.state is before


def test_click_restart_button():
    session = Session(Config(seed=4))
    session.request("down")
    before_restart = session.state

    handle_click(session, control_rects()[RESTART].center)

    assert session.state is not before_restart
    assert session.state == second_game(4)


def test_click_on_board_is_noop():
    session = Session(Config(seed=0))
    before = session.state
    handle_click(session, (5, 5))
    assert session.state is before
