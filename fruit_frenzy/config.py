from __future__ import annotations

"""Game configuration constants for Fruit Frenzy."""

# Game configuration
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
FPS = 60

# Session
INITIAL_LIVES = 3

# Spawning
BASE_SPEED = 2.0  # px/frame before type and difficulty scaling
SPAWN_INTERVAL_MS = 1000.0
MIN_SPAWN_INTERVAL_MS = 400.0
SPAWN_Y = -50.0  # start above the visible area
SPEED_JITTER = 2.0  # upper bound of the random speed bonus (px/frame)

# Difficulty: multiplier grows by 1.0 every DIFFICULTY_SCORE_STEP points
DIFFICULTY_SCORE_STEP = 500.0

# Catcher
CATCHER_MIN_X = 0.05
CATCHER_MAX_X = 0.95
CATCHER_START_X = 0.5
CATCHER_KEY_STEP = 0.05
KEY_REPEAT_DELAY_MS = 150  # hold an arrow key this long before it repeats
KEY_REPEAT_INTERVAL_MS = 35  # one catcher step per repeat
CATCHER_BASELINE_OFFSET = 60  # catcher Y = viewport height - offset
CATCHER_DRAW_OFFSET = 10  # basket sits this far above the bottom edge

# Collision
CATCH_BAND_ABOVE = 20  # px above the catcher baseline
CATCH_BAND_BELOW = 40  # px below the catcher baseline
HIT_RADIUS = 40  # horizontal px distance for a catch
MISS_MARGIN = 20  # px below the viewport before a fruit counts as missed

# Fruit table: (glyph, points, base speed, colour)
FRUIT_TABLE = (
    ("apple", 10, 1.0, (220, 40, 50)),
    ("banana", 15, 1.2, (250, 220, 70)),
    ("grapes", 20, 1.5, (130, 60, 170)),
    ("orange", 10, 1.1, (250, 150, 30)),
    ("watermelon", 25, 1.3, (60, 170, 70)),
    ("strawberry", 30, 1.6, (235, 50, 90)),
    ("pineapple", 35, 1.8, (230, 190, 50)),
)
FRUIT_RADIUS = 16

# Palette (bright summer sky)
COL_SKY_TOP = (125, 211, 252)
COL_SKY_BOTTOM = (224, 242, 254)
COL_TEXT = (12, 74, 110)
COL_TEXT_MUTED = (100, 116, 139)
COL_PANEL = (255, 255, 255)
COL_SHADE = (0, 0, 0)
LEAF_COLOR = (40, 120, 40)
BASKET_COLOR = (176, 120, 60)
BASKET_WEAVE = (130, 80, 35)
HEART_COLOR = (225, 29, 72)

# Basket wobble
WOBBLE_PERIOD_MS = 200.0
WOBBLE_AMPLITUDE = 0.05  # radians
