"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass
from typing import Optional

from .config import GameConfig, DEFAULT_CONFIG


@dataclass(frozen=True)
class Box:
    """Axis-aligned rectangle in grid units."""
    left: float
    top: float
    right: float
    bottom: float


class Player:
    """
    The player sprite. Only the horizontal position changes; it is clamped to
    the playfield on every assignment so callers never have to check bounds.
    """

    def __init__(self, config: GameConfig = DEFAULT_CONFIG, x: Optional[float] = None):
        self.config = config
        self._y = config.player_y
        self._x = 0.0
        self.x = config.player_start_x if x is None else x

    @staticmethod
    def clamp_x(new_x: float, config: GameConfig) -> float:
        """Returns new_x limited to [0, columns - player_width]."""
        if new_x > config.max_player_x:
            return config.max_player_x
        if new_x < 0:
            return 0.0
        return new_x

    @property
    def x(self) -> float:
        return self._x

    @x.setter
    def x(self, new_x: float):
        self._x = self.clamp_x(new_x, self.config)

    def set_x(self, new_x: float) -> float:
        self.x = new_x
        return self._x

    @property
    def y(self) -> float:
        return self._y

    def bounding_box(self) -> Box:
        return Box(
            left=self._x,
            top=self._y,
            right=self._x + self.config.player_width,
            bottom=self._y + self.config.player_height,
        )

    def to_snapshot(self):
        """Prepares a minimal state dictionary for the renderer."""
        return {"x": round(self._x, 4), "y": round(self._y, 4)}

    def __repr__(self):
        return f"Player(x={self._x!r}, y={self._y!r})"


@dataclass
class Obstacle:
    """
    A horizontal wall with a gap. The left wall covers columns
    [0, left_width], the right wall covers [right_x, columns].
    """
    left_width: float
    right_x: float
    y: float = 1.0

    @property
    def gap_width(self) -> float:
        return self.right_x - self.left_width

    def advance(self, distance: float):
        """Moves the obstacle down; there is no lower bound."""
        self.y += distance

    def left_box(self, config: GameConfig = DEFAULT_CONFIG) -> Box:
        return Box(0.0, self.y, self.left_width, self.y + config.obstacle_height)

    def right_box(self, config: GameConfig = DEFAULT_CONFIG) -> Box:
        return Box(self.right_x, self.y, float(config.columns), self.y + config.obstacle_height)

    def to_snapshot(self):
        return {
            "left_width": self.left_width,
            "right_x": self.right_x,
            "y": round(self.y, 4),
        }
