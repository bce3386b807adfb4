"""
config.py — Shared constants for the entire application.
No logic, no imports from internal modules.
"""

import os

ASSETS_DIR = os.path.join(os.path.dirname(__file__), "assets")

# ── Window & Grid ─────────────────────────────────────────────────
WIDTH, HEIGHT   = 640, 480
CELL            = 10
COLS            = WIDTH // CELL     # 64
ROWS            = HEIGHT // CELL    # 48
HUD_ROWS        = 2                 # rows 0-1 hold the score, never played on
TPS             = 60
WINDOW_TITLE    = "Snake Game"

# ── Colors (RGBA) ─────────────────────────────────────────────────
BG          = (0,   0,   0,   255)
BODY_COL    = (0,   135, 0,   255)
HEAD_COL    = (0,   255, 0,   255)
DEAD_COL    = (150, 25,  75,  255)
FOOD_COL    = (200, 0,   0,   255)
WALL_COL    = (105, 105, 105, 255)
TEXT_COL    = (255, 255, 255, 255)

# ── Gameplay ──────────────────────────────────────────────────────
START_SNAKE = ((3, 3), (2, 3), (1, 3))   # head first
START_SPEED = 5
MIN_SPEED   = 1
MAX_SPEED   = 50

# ── Fonts ─────────────────────────────────────────────────────────
FONT_PATH   = os.path.join(ASSETS_DIR, "PressStart2P-Regular.ttf")   # missing file = pygame default face
FONT_DPI    = 80
FONT_SIZES  = {
    "score": CELL,      # live score, "press spacebar to continue"
    "title": CELL * 2,  # "Snake Game", "Game Over"
    "small": CELL,      # high score, "press spacebar to start"
}

# ── Text ──────────────────────────────────────────────────────────
TITLE_TEXT      = "Snake Game"
HIGH_SCORE_TEXT = "high score: {}"
START_TEXT      = "press spacebar to start"
GAME_OVER_TEXT  = "Game Over"
CONTINUE_TEXT   = "press spacebar to continue"

# ── Game States ───────────────────────────────────────────────────
STATE_HOME    = "home"
STATE_PLAYING = "playing"
STATE_PAUSED  = "paused"
STATE_OVER    = "over"
