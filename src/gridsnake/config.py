from __future__ import annotations

APP_NAME = "gridsnake"

# Board
GRID = 24
BLOCK = 20
HUD_HEIGHT = 32
WIDTH = GRID * BLOCK
HEIGHT = GRID * BLOCK + HUD_HEIGHT

START_DIRECTION = (1, 0)
START_LENGTH = 3

# Timing (milliseconds)
BASE_TICK_MS = 120
SPEEDUP_PER_FOOD = 0.98
MIN_TICK_MS = 55
MAX_FRAME_MS = 1000
FPS_LIMIT = 120

# Persistence
BEST_SCORE_KEY = "gridsnake.best"
STORE_FILENAME = "store.json"

# Colors
BG = (12, 17, 24)
GRID_LINE = (22, 30, 41)
HUD_BG = (17, 24, 38)
TEXT = (230, 237, 243)
FOOD = (255, 220, 120)
FOOD_GLOW = (90, 78, 48)
SNAKE_HEAD = (160, 240, 190)
SNAKE_BODY = (118, 166, 137)
EYE = (10, 15, 20)
OVERLAY = (0, 0, 0, 140)
