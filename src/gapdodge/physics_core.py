"""
physics_core.py: The shared, deterministic kinematic functions and collision logic.
"""

import logging
import math
import random
from typing import Iterable, List, Optional

from .config import GameConfig, DEFAULT_CONFIG
from .data_models import Box, Player, Obstacle

logger = logging.getLogger(__name__)


def random_int(low: int, high: int, rng: Optional[random.Random] = None) -> int:
    """
    Draws an integer in [low, high] as ceil(random() * (high - low) + low).

    The ceiling makes `low` almost unreachable and biases the draw toward
    `high`. Gap placement depends on that distribution, so it is kept as is.
    """
    value = (rng or random).random() * (high - low) + low
    return math.ceil(value)


def boxes_overlap(a: Box, b: Box) -> bool:
    """True unless the boxes are disjoint on an axis. Touching edges overlap."""
    return not (
        b.left > a.right
        or b.right < a.left
        or b.top > a.bottom
        or b.bottom < a.top
    )


class PhysicsCore:
    """
    Shared deterministic rules: player movement, obstacle motion, spawning
    and collision. Subclassed by the game engine, which adds the state machine.
    """

    def __init__(self, config: GameConfig = DEFAULT_CONFIG, rng: Optional[random.Random] = None):
        self.config = config
        self.rng = rng or random.Random()

    @property
    def DT(self) -> float:
        return self.config.tick_time

    def move_player(self, player: Player, direction: int) -> float:
        """Shifts the player one tick left (-1) or right (+1). Returns the new x."""
        return player.set_x(player.x + direction * self.config.player_speed * self.DT)

    def step_obstacles(self, obstacles: Iterable[Obstacle]):
        """Moves every obstacle down by one tick's worth of travel."""
        distance = self.config.obstacle_speed * self.DT
        for obstacle in obstacles:
            obstacle.advance(distance)

    def spawn_obstacle(self) -> Obstacle:
        """Creates an obstacle at the top whose gap always fits the player."""
        cfg = self.config
        spacing = random_int(cfg.player_width + 1, cfg.player_width + 2, self.rng)
        space_start = random_int(0, cfg.columns - spacing, self.rng)
        obstacle = Obstacle(
            left_width=float(space_start),
            right_x=float(space_start + spacing),
            y=cfg.obstacle_start_y,
        )
        logger.debug("Spawned obstacle with gap [%s, %s]", obstacle.left_width, obstacle.right_x)
        return obstacle

    def collides(self, player: Player, obstacle: Obstacle) -> bool:
        box = player.bounding_box()
        return (
            boxes_overlap(box, obstacle.left_box(self.config))
            or boxes_overlap(box, obstacle.right_box(self.config))
        )

    def check_collision(self, player: Player, obstacles: List[Obstacle]) -> bool:
        """Checks the player against both walls of every obstacle."""
        return any(self.collides(player, obstacle) for obstacle in obstacles)
