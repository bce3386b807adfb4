"""
model.py — Model layer.

Owns ALL game state and rules. Zero rendering, zero input handling.
Exposes a clean API for the Controller to drive and the View to read.

Classes:
    Tile          — integer grid cell, doubles as a direction vector
    Direction     — the four unit tiles
    Key           — logical keys understood by advance()
    Board         — walls, snake, food and the occupancy index over them
    GameSnapshot  — frozen view of one frame for the presenter
    GameModel     — phase machine; advances one logical step per qualifying tick
"""

import enum
import logging
import random
from collections import deque
from dataclasses import dataclass
from typing import Collection, NamedTuple, Optional

from .config import (
    COLS, ROWS, HUD_ROWS, TPS,
    START_SNAKE, START_SPEED, MIN_SPEED, MAX_SPEED,
    STATE_HOME, STATE_PLAYING, STATE_PAUSED, STATE_OVER,
)

logger = logging.getLogger(__name__)


class QuitGame(Exception):
    """Raised by GameModel.advance() when the quit key is pressed."""


class BoardFull(Exception):
    """No unoccupied tile is left to put food on."""


# ──────────────────────────── Tile ───────────────────────────────
class Tile(NamedTuple):
    """Grid cell (x, y). Adding a direction tile yields the neighbour."""
    x: int
    y: int

    def __add__(self, other) -> "Tile":
        return Tile(self.x + other[0], self.y + other[1])

    def __neg__(self) -> "Tile":
        return Tile(-self.x, -self.y)


class Direction:
    """Unit tiles. The opposite of d is always -d."""
    UP    = Tile( 0, -1)
    DOWN  = Tile( 0,  1)
    LEFT  = Tile(-1,  0)
    RIGHT = Tile( 1,  0)


ALL_DIRS = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


# ──────────────────────────── Input ──────────────────────────────
class Key(enum.Enum):
    UP    = "up"
    DOWN  = "down"
    LEFT  = "left"
    RIGHT = "right"
    H     = "h"
    J     = "j"
    K     = "k"
    L     = "l"
    Q     = "q"
    EQUAL = "equal"
    MINUS = "minus"
    SPACE = "space"


# Only the first of these found in a snapshot is acted on.
KEY_PRIORITY = (
    Key.UP, Key.DOWN, Key.LEFT, Key.RIGHT,
    Key.K, Key.J, Key.H, Key.L,
    Key.EQUAL, Key.MINUS,
)

KEY_DIRECTIONS = {
    Key.UP:    Direction.UP,
    Key.DOWN:  Direction.DOWN,
    Key.LEFT:  Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
    Key.K:     Direction.UP,
    Key.J:     Direction.DOWN,
    Key.H:     Direction.LEFT,
    Key.L:     Direction.RIGHT,
}


# ──────────────────────────── Board ──────────────────────────────
def build_walls() -> frozenset:
    """Rectangular frame: rows 2 and ROWS-1, columns 0 and COLS-1."""
    walls = set()
    for x in range(COLS):
        walls.add(Tile(x, HUD_ROWS))
        walls.add(Tile(x, ROWS - 1))
    for y in range(HUD_ROWS, ROWS):
        walls.add(Tile(0, y))
        walls.add(Tile(COLS - 1, y))
    return frozenset(walls)


class Board:
    """
    Walls, snake and food, plus `occupied`: the union of all three.

    Every method that adds or removes a snake or food tile updates
    `occupied` in the same call, so the two never disagree.
    """

    # Food is sampled from x in [0, COLS), y in [HUD_ROWS, ROWS).
    SPAWN_AREA = COLS * (ROWS - HUD_ROWS)

    def __init__(self, rng: random.Random):
        self.rng = rng
        self.walls: frozenset = build_walls()
        self.snake: deque[Tile] = deque()
        self.food: set[Tile] = set()
        self.occupied: set[Tile] = set()
        self.reset()

    # ── Accessors ────────────────────────────────────────────────
    @property
    def head(self) -> Tile:
        return self.snake[0]

    @property
    def free_tiles(self) -> int:
        return self.SPAWN_AREA - len(self.occupied)

    def is_occupied(self, tile: Tile) -> bool:
        return tile in self.occupied

    # ── Commands ─────────────────────────────────────────────────
    def reset(self) -> None:
        """Fresh round: starting snake, no food, then one spawned food."""
        self.snake = deque(Tile(x, y) for x, y in START_SNAKE)
        self.food = set()
        self.occupied = set(self.walls)
        self.occupied.update(self.snake)
        self.spawn_food()

    def spawn_food(self) -> Tile:
        """Rejection-sample an unoccupied tile and put food on it."""
        if self.free_tiles <= 0:
            raise BoardFull(f"no free tile left for food ({len(self.snake)} snake tiles)")
        while True:
            tile = Tile(self.rng.randrange(COLS), self.rng.randrange(HUD_ROWS, ROWS))
            if tile not in self.occupied:
                break
        self.place_food(tile)
        return tile

    def place_food(self, tile) -> None:
        tile = Tile(*tile)
        if not (0 <= tile.x < COLS and HUD_ROWS <= tile.y < ROWS):
            raise ValueError(f"food tile {tile} is outside the board")
        if tile in self.occupied:
            raise ValueError(f"food tile {tile} is already occupied")
        self.food.add(tile)
        self.occupied.add(tile)

    def clear_food(self) -> None:
        self.occupied.difference_update(self.food)
        self.food.clear()

    def move_head(self, new_head: Tile) -> None:
        """Plain move: the tail leaves, the new head arrives."""
        tail = self.snake.pop()
        self.occupied.discard(tail)
        self.snake.appendleft(new_head)
        self.occupied.add(new_head)

    def grow_head(self, new_head: Tile) -> None:
        """Eat the food at new_head; the tail stays. The tile stays occupied."""
        self.food.remove(new_head)
        self.snake.appendleft(new_head)


# ─────────────────────────── Snapshot ────────────────────────────
@dataclass(frozen=True)
class GameSnapshot:
    state: str
    walls: frozenset
    snake: tuple
    food: frozenset
    score: int
    high_score: int
    speed: int
    tick: int

    @property
    def is_playing(self) -> bool:
        return self.state != STATE_OVER


# ─────────────────────────── GameModel ───────────────────────────
class GameModel:
    """
    Top-level model. Owns all game state.
    The controller calls advance() exactly TPS times per second.
    """

    def __init__(self, tps: int = TPS, seed: Optional[int] = None):
        self.tps = tps
        self.rng = random.Random(seed)
        self.state: str = STATE_HOME
        self.high_score: int = 0
        self.score: int = 0
        self.tick: int = 0
        self.speed: int = START_SPEED
        self.direction: Tile = Direction.RIGHT
        self.board = Board(self.rng)
        self.reset()

    # ── Public API ───────────────────────────────────────────────
    def reset(self) -> None:
        """Start-of-round state. The phase and the high score are untouched."""
        self.board.reset()
        self.direction = Direction.RIGHT
        self.speed = START_SPEED
        self.tick = 0
        self.update_score(0)

    def start(self) -> None:
        self.reset()
        self._set_state(STATE_PLAYING)

    def pause(self) -> None:
        if self.state == STATE_PLAYING:
            self._set_state(STATE_PAUSED)

    def resume(self) -> None:
        if self.state == STATE_PAUSED:
            self._set_state(STATE_PLAYING)

    def back_to_home(self) -> None:
        self.reset()
        self._set_state(STATE_HOME)

    def advance(self, pressed: Collection[Key] = ()) -> None:
        """
        Consume one tick worth of just-pressed keys.

        Space means Start on the home screen, Continue after a game over
        and toggles pause otherwise. Unpausing also counts as a playing
        tick; every other phase change ends the call.
        """
        pressed = frozenset(pressed)
        if Key.Q in pressed:
            raise QuitGame()

        if Key.SPACE in pressed:
            if self.state == STATE_HOME:
                self.start()
                return
            if self.state == STATE_OVER:
                self.back_to_home()
                return
            if self.state == STATE_PLAYING:
                self.pause()
                return
            self.resume()

        if self.state != STATE_PLAYING:
            return

        self._apply_keys(pressed)

        self.tick += 1
        if self.tick % self.step_period == 0:
            self._step()

    def view(self) -> GameSnapshot:
        return GameSnapshot(
            state=self.state,
            walls=self.board.walls,
            snake=tuple(self.board.snake),
            food=frozenset(self.board.food),
            score=self.score,
            high_score=self.high_score,
            speed=self.speed,
            tick=self.tick,
        )

    @property
    def step_period(self) -> int:
        """Ticks between two logical steps at the current speed."""
        return max(1, self.tps // self.speed)

    def request_direction(self, new_dir: Tile) -> None:
        """Turn the snake (ignored if it would reverse it or is not a unit tile)."""
        if new_dir in ALL_DIRS and new_dir != -self.direction:
            self.direction = new_dir

    def increase_speed(self, n: int) -> None:
        if n < 0:
            return
        self.speed = min(self.speed + n, MAX_SPEED)

    def decrease_speed(self, n: int) -> None:
        if n < 0:
            return
        self.speed = max(self.speed - n, MIN_SPEED)

    def update_score(self, score: int) -> None:
        self.score = score
        if self.score >= self.high_score:
            self.high_score = self.score

    # ── Private helpers ──────────────────────────────────────────
    def _set_state(self, state: str) -> None:
        logger.debug("state %s -> %s", self.state, state)
        if state == STATE_PLAYING and self.state == STATE_HOME:
            logger.info("new round (high score %d)", self.high_score)
        self.state = state

    def _apply_keys(self, pressed: frozenset) -> None:
        key = next((k for k in KEY_PRIORITY if k in pressed), None)
        if key is None:
            return
        if key in KEY_DIRECTIONS:
            self.request_direction(KEY_DIRECTIONS[key])
        elif key == Key.EQUAL:
            self.increase_speed(1)
        else:
            self.decrease_speed(1)

    def _step(self) -> None:
        board = self.board
        new_head = board.head + self.direction

        if not board.is_occupied(new_head):
            board.move_head(new_head)
            return

        if new_head not in board.food:
            logger.debug("collision at %s with score %d", new_head, self.score)
            self._set_state(STATE_OVER)
            return

        board.grow_head(new_head)
        self.increase_speed(1)
        self.update_score(self.score + 1)
        try:
            board.spawn_food()
        except BoardFull:
            logger.info("board full at score %d, round won", self.score)
            self._set_state(STATE_OVER)
