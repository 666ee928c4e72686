"""
constants.py: Centralized configuration for the playfield, timing and window.
"""

# -------- Playfield (grid units) --------
COLUMNS = 64
ROWS = 48

# -------- Player Config --------
PLAYER_WIDTH = 3
PLAYER_HEIGHT = 5
PLAYER_SPEED = 24.0             # Horizontal speed (grid units/second)

# -------- Obstacle Config --------
OBSTACLE_HEIGHT = 1
OBSTACLE_SPEED = 12.0           # Vertical speed (grid units/second)
OBSTACLE_START_Y = 1.0
OBSTACLE_SPAWN_DELAY = 2.0      # seconds between spawns (60 ticks)

# -------- Time Config --------
TICK_RATE = 30                  # Simulation ticks per second
TICK_TIME = 1.0 / TICK_RATE     # Fixed time step (Delta Time)
TICK_INTERVAL_MS = 1000.0 / TICK_RATE

# -------- Input --------
KEY_LEFT = "ArrowLeft"
KEY_RIGHT = "ArrowRight"

# -------- Window Config --------
SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480
RENDER_FPS = 60                 # Can be faster than TICK_RATE
MAX_FRAME_TIME = 0.25           # seconds; longer frames (window drags) are cut short

BACKGROUND_COLOR = (0, 0, 0)
PLAYER_COLOR = (0x42, 0x16, 0x52)
OBSTACLE_COLOR = (255, 255, 255)
TEXT_COLOR = (255, 50, 50)
