"""
constants.py: Centralized configuration for game and display settings.
"""

# -------- Timing Config --------
FPS = 60                        # Display frames (and default ticks) per second
TICK_TIME = 1.0 / FPS           # Fixed time step for the optional accumulator
MAX_TICKS_PER_FRAME = 5         # Accumulator cap after a stall

# -------- Game World Config --------
FIELD_WIDTH = 600
FIELD_HEIGHT = 250
GROUND_Y = 200                  # Character resting y (screen coordinates, grows down)

# -------- Character Config --------
CHARACTER_X = 60                # Fixed character X position
CHARACTER_WIDTH = 40
CHARACTER_HEIGHT = 40

# -------- Physics Config (pixels / tick) --------
GRAVITY = 0.5                   # Added to velocity each airborne tick
JUMP_VELOCITY = -18.0           # Negative is upward

# -------- Obstacle Config --------
OBSTACLE_WIDTH = 20
OBSTACLE_HEIGHT = 40
OBSTACLE_SPEED = 3              # Leftward drift per tick
OBSTACLE_GAP = 200              # Spawn when last obstacle is left of FIELD_WIDTH - GAP
OBSTACLE_JITTER_MIN = 0
OBSTACLE_JITTER_MAX = 100
INITIAL_OBSTACLE_OFFSET = 100   # First obstacle sits at FIELD_WIDTH + offset

# -------- Score Config --------
SCORE_PER_TICK = 1
