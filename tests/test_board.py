"""Tests for the board: walls, snake, food and the occupancy index."""

from __future__ import annotations

import random

import pytest

from snake_game.config import COLS, ROWS, HUD_ROWS
from snake_game.model import Board, BoardFull, Tile, build_walls


@pytest.fixture
def board() -> Board:
    return Board(random.Random(7))


def _assert_index_consistent(board: Board) -> None:
    assert board.occupied == set(board.walls) | set(board.snake) | board.food


def test_walls_form_frame_below_hud() -> None:
    walls = build_walls()

    assert all(Tile(x, HUD_ROWS) in walls for x in range(COLS))
    assert all(Tile(x, ROWS - 1) in walls for x in range(COLS))
    assert all(Tile(0, y) in walls and Tile(COLS - 1, y) in walls for y in range(HUD_ROWS, ROWS))
    assert not any(t.y < HUD_ROWS for t in walls)
    assert len(walls) == 2 * COLS + 2 * (ROWS - HUD_ROWS - 2)


def test_reset_places_starting_snake_and_one_food(board: Board) -> None:
    assert list(board.snake) == [(3, 3), (2, 3), (1, 3)]
    assert board.head == Tile(3, 3)
    assert len(board.food) == 1
    food = next(iter(board.food))
    assert food not in board.walls and food not in board.snake
    _assert_index_consistent(board)


def test_reset_is_idempotent_apart_from_food(board: Board) -> None:
    board.reset()
    first = (list(board.snake), board.walls, board.occupied - board.food)
    board.reset()
    second = (list(board.snake), board.walls, board.occupied - board.food)

    assert first == second
    assert len(board.food) == 1


def test_spawned_food_never_lands_on_an_occupied_tile(board: Board) -> None:
    for _ in range(500):
        before = set(board.occupied)
        tile = board.spawn_food()
        assert tile not in before
        assert HUD_ROWS <= tile.y < ROWS and 0 <= tile.x < COLS
    _assert_index_consistent(board)


def test_spawn_on_full_board_raises(board: Board) -> None:
    for x in range(COLS):
        for y in range(HUD_ROWS, ROWS):
            if not board.is_occupied(Tile(x, y)):
                board.place_food((x, y))

    assert board.free_tiles == 0
    with pytest.raises(BoardFull):
        board.spawn_food()


def test_place_food_rejects_occupied_and_out_of_board_tiles(board: Board) -> None:
    with pytest.raises(ValueError):
        board.place_food((3, 3))
    with pytest.raises(ValueError):
        board.place_food((10, 2))
    with pytest.raises(ValueError):
        board.place_food((10, 1))
    with pytest.raises(ValueError):
        board.place_food((COLS, 10))


def test_clear_food_drops_it_from_the_index(board: Board) -> None:
    food = next(iter(board.food))
    board.clear_food()

    assert not board.food
    assert not board.is_occupied(food)
    _assert_index_consistent(board)


def test_move_head_frees_the_tail(board: Board) -> None:
    board.clear_food()
    board.move_head(Tile(4, 3))

    assert list(board.snake) == [(4, 3), (3, 3), (2, 3)]
    assert not board.is_occupied(Tile(1, 3))
    assert board.is_occupied(Tile(4, 3))
    _assert_index_consistent(board)


def test_grow_head_keeps_tail_and_tile_stays_occupied(board: Board) -> None:
    board.clear_food()
    board.place_food((4, 3))
    board.grow_head(Tile(4, 3))

    assert list(board.snake) == [(4, 3), (3, 3), (2, 3), (1, 3)]
    assert not board.food
    assert board.is_occupied(Tile(4, 3))
    _assert_index_consistent(board)


def test_tile_arithmetic() -> None:
    assert Tile(3, 3) + Tile(1, 0) == Tile(4, 3)
    assert -Tile(0, -1) == Tile(0, 1)
    assert Tile(2, 5) == (2, 5)
