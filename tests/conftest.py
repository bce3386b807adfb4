"""Shared fixtures for the snake_game tests."""

from __future__ import annotations

import pytest

from snake_game.config import STATE_PLAYING
from snake_game.model import GameModel, Key, Tile

# Far from the starting snake, so it never gets eaten by accident.
PARKED_FOOD = Tile(60, 40)


def run_ticks(model: GameModel, n: int, keys=()) -> None:
    for _ in range(n):
        model.advance(keys)


def step_once(model: GameModel, keys=()) -> None:
    """Advance until one logical step happened (the head moved or the round ended)."""
    head, state = model.board.head, model.state
    model.advance(keys)
    for _ in range(model.tps + 1):
        if model.board.head != head or model.state != state:
            return
        model.advance()
    raise AssertionError("no step happened within one second of ticks")


def force_food(model: GameModel, tile) -> None:
    model.board.clear_food()
    model.board.place_food(tile)


def eat_ahead(model: GameModel, n: int) -> None:
    """Put food right in front of the head and eat it, n times."""
    for _ in range(n):
        force_food(model, model.board.head + model.direction)
        step_once(model)
    force_food(model, PARKED_FOOD)


@pytest.fixture
def model() -> GameModel:
    return GameModel(tps=60, seed=1234)


@pytest.fixture
def playing(model: GameModel) -> GameModel:
    """A round that has just started, with its food parked out of the way."""
    model.advance({Key.SPACE})
    assert model.state == STATE_PLAYING
    force_food(model, PARKED_FOOD)
    return model
