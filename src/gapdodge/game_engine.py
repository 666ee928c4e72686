"""
game_engine.py: The game loop and its IDLE -> RUNNING -> GAME_OVER state machine.
"""

import logging
import random
from enum import Enum
from typing import List, Optional, Protocol

from .config import GameConfig, DEFAULT_CONFIG
from .constants import KEY_LEFT, KEY_RIGHT
from .data_models import Player, Obstacle
from .physics_core import PhysicsCore

logger = logging.getLogger(__name__)


class GameState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    GAME_OVER = "game_over"


class InputSource(Protocol):
    def is_pressed(self, key_name: str) -> bool: ...


class Renderer(Protocol):
    def render(self, snapshot: dict) -> None: ...

    def destroy(self) -> None: ...


class Scheduler(Protocol):
    def every(self, interval_ms: float, callback) -> int: ...

    def cancel(self, handle: int) -> None: ...


class GameEngine(PhysicsCore):
    """
    Owns the player and the obstacle list and advances them one fixed tick
    at a time. Ticks come from the scheduler once `start()` has been called.
    """

    def __init__(
        self,
        renderer: Renderer,
        inputs: InputSource,
        scheduler: Scheduler,
        config: GameConfig = DEFAULT_CONFIG,
        rng: Optional[random.Random] = None,
    ):
        super().__init__(config, rng)
        self._renderer = renderer
        self._inputs = inputs
        self._scheduler = scheduler

        self._player = Player(config)
        self._obstacles: List[Obstacle] = []
        self._state = GameState.IDLE
        self._timer_handle: Optional[int] = None

        self.tick_count = 0
        self.spawn_counter = 0

    # ---------- Read-only views ----------

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def player(self) -> Player:
        return self._player

    @property
    def obstacles(self) -> List[Obstacle]:
        return self._obstacles

    @property
    def delta_time(self) -> float:
        """Time simulated per tick. Constant: ticks are assumed to be on schedule."""
        return self.DT

    @property
    def is_running(self) -> bool:
        return self._state is GameState.RUNNING

    @property
    def is_game_over(self) -> bool:
        return self._state is GameState.GAME_OVER

    # ---------- Lifecycle ----------

    def start(self):
        """Starts (or resumes) ticking. Does nothing once the game is over."""
        if self._state is not GameState.IDLE:
            logger.info("start() ignored while %s", self._state.value)
            return

        if not self._obstacles:
            self._spawn_obstacle()

        self._state = GameState.RUNNING
        self._timer_handle = self._scheduler.every(self.config.tick_interval_ms, self.update)
        logger.info("Game started at %d ticks/s", self.config.tick_rate)

    def stop(self):
        """Pauses the game. Player and obstacles are kept so start() can resume."""
        self._cancel_timer()
        if self._state is GameState.RUNNING:
            self._state = GameState.IDLE
            logger.info("Game paused at tick %d", self.tick_count)

    def _cancel_timer(self):
        if self._timer_handle is not None:
            self._scheduler.cancel(self._timer_handle)
            self._timer_handle = None

    def _spawn_obstacle(self):
        self._obstacles.append(self.spawn_obstacle())
        self.spawn_counter = 0

    def _game_over(self):
        self._state = GameState.GAME_OVER
        self._cancel_timer()
        logger.info("Game over at tick %d with %d obstacles spawned",
                    self.tick_count, len(self._obstacles))
        self._renderer.destroy()

    # ---------- Tick ----------

    def update(self):
        """One fixed simulation step."""
        if self._state is not GameState.RUNNING:
            return

        self.tick_count += 1

        # 1. Apply keyboard input
        if self._inputs.is_pressed(KEY_LEFT):
            self.move_player(self._player, -1)
        if self._inputs.is_pressed(KEY_RIGHT):
            self.move_player(self._player, 1)

        # 2. Move obstacles down
        self.step_obstacles(self._obstacles)

        # 3. Spawn on a fixed cadence
        self.spawn_counter += 1
        if self.spawn_counter >= self.config.spawn_interval_ticks:
            self._spawn_obstacle()

        # 4. Collisions end the game for good
        if self.check_collision(self._player, self._obstacles):
            self._game_over()
            return

        # 5. Hand a copy of the state to the renderer
        self._renderer.render(self.snapshot())

    def snapshot(self) -> dict:
        """Plain-data copy of the current state; safe to hand to the renderer."""
        return {
            "tick": self.tick_count,
            "state": self._state.value,
            "player": self._player.to_snapshot(),
            "obstacles": [obstacle.to_snapshot() for obstacle in self._obstacles],
        }
