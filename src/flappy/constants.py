"""
constants.py: Default design constants for the game and its simulation core.
"""

import math

# -------- Time Config --------
DESIRED_FPS = 60                # Simulation ticks per second
RENDER_FPS = 60                 # Host frame cap, independent of DESIRED_FPS

# -------- Screen Config --------
SCREEN_WIDTH = 1008
SCREEN_HEIGHT = 624
BACKGROUND_HEIGHT = 512         # Playfield height; the base strip sits below it
BACKGROUND_TILE_WIDTH = 288
BASE_TILE_WIDTH = 336

# -------- Physics Config (distance per tick) --------
FALL_SPEED = 18.0
FLAP_SPEED = 320.0
FLAP_TIMEOUT = 0.35             # seconds between held-input flaps
MOVE_SPEED = 2.0                # world scroll per tick

UP_ANGLE_MAX = -0.45            # radians
DOWN_ANGLE_MAX = 1.5

# -------- Bounding Boxes (half extents) --------
PLAYER_BBOX = (12.0, 12.0)
PIPE_SPRITE_WIDTH = 52
PIPE_SPRITE_HEIGHT = 320
PIPE_BBOX = (PIPE_SPRITE_WIDTH / 2, PIPE_SPRITE_HEIGHT / 2)

# -------- Pipe Config --------
PIPE_GAP = 50.0                 # half the vertical opening
PAIR_SPACING = 200.0
PAIR_COUNT = 10
FIRST_PIPE_X_OFFSET = 200.0
MIN_RANGE = 100.0               # keeps the opening away from both edges
TOP_PIPE_FACING = math.pi
BOTTOM_PIPE_FACING = 0.0

# -------- Game Flow --------
COUNTDOWN_SECONDS = 0.0         # 0 skips the countdown phase
POINTS_PER_LEVEL = 10
SPRITE_CYCLE_FRAMES = 15
