"""
renderer.py: Draws game snapshots onto a pygame surface.

The game works in grid units; this is the only place that knows about pixels.
"""

import logging

import pygame

from .config import GameConfig, DEFAULT_CONFIG
from .constants import BACKGROUND_COLOR, PLAYER_COLOR, OBSTACLE_COLOR, TEXT_COLOR

logger = logging.getLogger(__name__)


class GridRenderer:
    def __init__(self, surface: pygame.Surface, config: GameConfig = DEFAULT_CONFIG):
        self.surface = surface
        self.config = config
        self.detached = False
        self.frames_rendered = 0
        self._font = None

    @property
    def width(self) -> int:
        return self.surface.get_width()

    @property
    def height(self) -> int:
        return self.surface.get_height()

    @property
    def column_width(self) -> float:
        return self.width / self.config.columns

    @property
    def row_height(self) -> float:
        return self.height / self.config.rows

    def to_pixels(self, left: float, top: float, width: float, height: float) -> pygame.Rect:
        """Converts a grid-unit rectangle to a pixel Rect."""
        return pygame.Rect(
            round(left * self.column_width),
            round(top * self.row_height),
            round(width * self.column_width),
            round(height * self.row_height),
        )

    def render(self, snapshot: dict):
        if self.detached:
            return

        self.surface.fill(BACKGROUND_COLOR)
        self._draw_player(snapshot["player"])
        for obstacle in snapshot["obstacles"]:
            self._draw_obstacle(obstacle)
        self.frames_rendered += 1

    def destroy(self):
        """Detaches from the game: shows the game over banner and ignores later frames."""
        if self.detached:
            return
        self.detached = True
        self.draw_banner("GAME OVER")
        logger.debug("Renderer detached after %d frames", self.frames_rendered)

    def draw_banner(self, text: str):
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, 48)
        label = self._font.render(text, True, TEXT_COLOR)
        self.surface.blit(label, (self.width // 2 - label.get_width() // 2,
                                  self.height // 2 - label.get_height() // 2))

    def _draw_player(self, player: dict):
        cfg = self.config
        rect = self.to_pixels(player["x"], player["y"], cfg.player_width, cfg.player_height)
        pygame.draw.rect(self.surface, PLAYER_COLOR, rect)

    def _draw_obstacle(self, obstacle: dict):
        cfg = self.config
        y = obstacle["y"]

        # Left wall
        if obstacle["left_width"] > 0:
            pygame.draw.rect(self.surface, OBSTACLE_COLOR,
                             self.to_pixels(0, y, obstacle["left_width"], cfg.obstacle_height))

        # Right wall
        right_width = cfg.columns - obstacle["right_x"]
        if right_width > 0:
            pygame.draw.rect(self.surface, OBSTACLE_COLOR,
                             self.to_pixels(obstacle["right_x"], y, right_width, cfg.obstacle_height))
