"""
config.py: Game settings bundled into a single immutable object.

Every component takes a GameConfig instead of reading the module constants
directly, so a smaller grid can be used without touching globals.
"""

import math
from dataclasses import dataclass

from .constants import (
    COLUMNS, ROWS, PLAYER_WIDTH, PLAYER_HEIGHT, PLAYER_SPEED,
    OBSTACLE_HEIGHT, OBSTACLE_SPEED, OBSTACLE_START_Y, OBSTACLE_SPAWN_DELAY,
    TICK_RATE
)


@dataclass(frozen=True)
class GameConfig:
    """Playfield, sprite and timing settings (all lengths in grid units)."""
    columns: int = COLUMNS
    rows: int = ROWS
    player_width: int = PLAYER_WIDTH
    player_height: int = PLAYER_HEIGHT
    player_speed: float = PLAYER_SPEED
    obstacle_height: int = OBSTACLE_HEIGHT
    obstacle_speed: float = OBSTACLE_SPEED
    obstacle_start_y: float = OBSTACLE_START_Y
    obstacle_spawn_delay: float = OBSTACLE_SPAWN_DELAY
    tick_rate: int = TICK_RATE

    @property
    def tick_time(self) -> float:
        """Seconds simulated by one tick."""
        return 1.0 / self.tick_rate

    @property
    def tick_interval_ms(self) -> float:
        return 1000.0 / self.tick_rate

    @property
    def spawn_interval_ticks(self) -> int:
        """Spawn delay expressed in whole ticks, never shorter than the delay."""
        return max(1, math.ceil(self.obstacle_spawn_delay / self.tick_time - 1e-9))

    @property
    def player_y(self) -> float:
        return float(self.rows - self.player_height - 1)

    @property
    def max_player_x(self) -> float:
        return float(self.columns - self.player_width)

    @property
    def player_start_x(self) -> float:
        return (self.columns - self.player_width) / 2


DEFAULT_CONFIG = GameConfig()
