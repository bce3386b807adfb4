"""
view.py — View layer.

Two halves:
  - build_frame(): a pure projection from a GameSnapshot to a list of
    draw commands. Text is centred from measured bounds, so only a
    FontMetrics object is needed, never a real surface.
  - GameView: loads the font faces once and replays the commands on a
    pygame surface.

Public API:
    GameView(screen)    — bind to a pygame surface
    view.render(model)  — draw the current frame and flip the display
"""

import logging
import os
from typing import NamedTuple, Optional, Protocol

import pygame

from .config import (
    WIDTH, HEIGHT, CELL, HUD_ROWS,
    BG, BODY_COL, HEAD_COL, DEAD_COL, FOOD_COL, WALL_COL, TEXT_COL,
    FONT_PATH, FONT_DPI, FONT_SIZES,
    TITLE_TEXT, HIGH_SCORE_TEXT, START_TEXT, GAME_OVER_TEXT, CONTINUE_TEXT,
    STATE_HOME,
)
from .model import GameModel, GameSnapshot, Tile

logger = logging.getLogger(__name__)

# ── Layout (baselines, px) ────────────────────────────────────────
SCORE_Y      = CELL * 3 // 2
TITLE_Y      = FONT_SIZES["title"] + CELL
HIGH_SCORE_Y = TITLE_Y + CELL + FONT_SIZES["small"]
START_Y      = HIGH_SCORE_Y + CELL * 3 + FONT_SIZES["small"]
PLAY_MID_Y   = (HUD_ROWS * CELL + HEIGHT) // 2


class FontLoadError(RuntimeError):
    """A font face could not be loaded; there is no game without glyphs."""


# ─────────────────────── draw commands ───────────────────────────
class DrawRect(NamedTuple):
    x: int
    y: int
    w: int
    h: int
    color: tuple
    antialias: bool = True


class DrawText(NamedTuple):
    """Text whose baseline starts at (x, y)."""
    text: str
    face: str
    x: int
    y: int
    color: tuple


class FontMetrics(Protocol):
    def measure(self, face: str, text: str) -> tuple[int, int]:
        """Return (width, ascent) in pixels."""


# ──────────────────────── projection ─────────────────────────────
def _tile_rect(tile: Tile, color: tuple) -> DrawRect:
    return DrawRect(tile[0] * CELL, tile[1] * CELL, CELL, CELL, color)


def _centred(metrics: FontMetrics, face: str, text: str, y: int) -> DrawText:
    width, _ = metrics.measure(face, text)
    return DrawText(text, face, (WIDTH - width) // 2, y, TEXT_COL)


def home_frame(snap: GameSnapshot, metrics: FontMetrics) -> list:
    return [
        _centred(metrics, "title", TITLE_TEXT, TITLE_Y),
        _centred(metrics, "small", HIGH_SCORE_TEXT.format(snap.high_score), HIGH_SCORE_Y),
        _centred(metrics, "small", START_TEXT, START_Y),
    ]


def game_over_text(metrics: FontMetrics) -> list:
    """Both lines as one block centred on the play area's midpoint."""
    _, over_ascent = metrics.measure("title", GAME_OVER_TEXT)
    _, cont_ascent = metrics.measure("score", CONTINUE_TEXT)
    top = PLAY_MID_Y - (over_ascent + CELL + cont_ascent) // 2
    over_y = top + over_ascent
    cont_y = over_y + CELL + cont_ascent
    return [
        _centred(metrics, "title", GAME_OVER_TEXT, over_y),
        _centred(metrics, "score", CONTINUE_TEXT, cont_y),
    ]


def play_frame(snap: GameSnapshot, metrics: FontMetrics) -> list:
    commands = [_tile_rect(t, WALL_COL) for t in sorted(snap.walls)]

    head_col, body_col = HEAD_COL, BODY_COL
    if not snap.is_playing:
        head_col = body_col = DEAD_COL
    head, *body = snap.snake
    commands.append(_tile_rect(head, head_col))
    commands.extend(_tile_rect(t, body_col) for t in body)

    commands.extend(_tile_rect(t, FOOD_COL) for t in sorted(snap.food))
    commands.append(_centred(metrics, "score", str(snap.score), SCORE_Y))

    if not snap.is_playing:
        commands.extend(game_over_text(metrics))
    return commands


def build_frame(snap: GameSnapshot, metrics: FontMetrics) -> list:
    """Draw commands for one frame. Paused frames look like playing ones."""
    if snap.state == STATE_HOME:
        return home_frame(snap, metrics)
    return play_frame(snap, metrics)


# ─────────────────────────── fonts ───────────────────────────────
class PygameFonts:
    """The three font faces, keyed by role, loaded once at startup."""

    def __init__(self, path: Optional[str] = FONT_PATH,
                 sizes: Optional[dict] = None, dpi: int = FONT_DPI):
        pygame.font.init()
        sizes = FONT_SIZES if sizes is None else sizes
        if path is not None and not os.path.isfile(path):
            logger.warning("font %r not found, using pygame's default face", path)
            path = None
        self.path = path
        self.faces: dict[str, pygame.font.Font] = {}
        for face, size in sizes.items():
            px = round(size * dpi / 72)
            try:
                self.faces[face] = pygame.font.Font(path, px)
            except (pygame.error, OSError) as exc:
                raise FontLoadError(f"cannot load font {path or 'default'!r} at {px}px: {exc}") from exc
        logger.info("loaded font %s", path or pygame.font.get_default_font())

    def measure(self, face: str, text: str) -> tuple[int, int]:
        font = self.faces[face]
        width, _ = font.size(text)
        return width, font.get_ascent()

    def draw(self, surface: pygame.Surface, cmd: DrawText) -> None:
        font = self.faces[cmd.face]
        surf = font.render(cmd.text, True, cmd.color)
        surface.blit(surf, (cmd.x, cmd.y - font.get_ascent()))


# ─────────────────────────── GameView ────────────────────────────
class GameView:
    """Renders the complete game frame from a GameModel."""

    def __init__(self, screen: pygame.Surface, fonts: Optional[PygameFonts] = None):
        self.screen = screen
        self.fonts = fonts if fonts is not None else PygameFonts()

    def render(self, model: GameModel) -> None:
        self.draw(model.view())
        pygame.display.flip()

    def draw(self, snap: GameSnapshot) -> None:
        self.screen.fill(BG)
        for cmd in build_frame(snap, self.fonts):
            if isinstance(cmd, DrawRect):
                # axis-aligned on whole pixels, antialiasing has nothing to smooth
                pygame.draw.rect(self.screen, cmd.color, pygame.Rect(cmd.x, cmd.y, cmd.w, cmd.h))
            else:
                self.fonts.draw(self.screen, cmd)
