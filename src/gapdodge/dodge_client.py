#!/usr/bin/env python3
"""
dodge_client.py

Window, event pump and main loop. Wires pygame input and the frame clock
into the game engine and draws its snapshots.
"""

import argparse
import logging
import random
from typing import Optional

import pygame

from .config import GameConfig, DEFAULT_CONFIG
from .constants import SCREEN_WIDTH, SCREEN_HEIGHT, RENDER_FPS, MAX_FRAME_TIME
from .game_engine import GameEngine, GameState
from .input_state import InputState
from .renderer import GridRenderer
from .scheduler import FixedStepScheduler


def frame_seconds(elapsed_ms: float) -> float:
    """Converts a clock tick to seconds, capped so a stalled frame can't queue a burst of ticks."""
    return min(elapsed_ms / 1000.0, MAX_FRAME_TIME)


class GapDodgeClient:
    def __init__(self, config: GameConfig = DEFAULT_CONFIG, seed: Optional[int] = None):
        pygame.init()
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Gap Dodge")

        self.clock = pygame.time.Clock()
        self.inputs = InputState()
        self.scheduler = FixedStepScheduler()
        self.renderer = GridRenderer(self.screen, config)
        self.engine = GameEngine(
            self.renderer, self.inputs, self.scheduler, config,
            rng=random.Random(seed),
        )

    def toggle_pause(self):
        if self.engine.state is GameState.RUNNING:
            self.engine.stop()
            self.renderer.draw_banner("PAUSED")
        elif self.engine.state is GameState.IDLE:
            self.engine.start()

    def run(self):
        """The main client execution loop."""
        print("Arrows / A,D = Move | P = Pause | Esc = Quit")
        self.engine.start()

        running = True
        while running:
            frame_time = frame_seconds(self.clock.tick(RENDER_FPS))

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_p:
                    self.toggle_pause()
                else:
                    self.inputs.handle_event(event)

            # Fixed-step ticks; the engine renders inside each tick
            self.scheduler.advance(frame_time)
            pygame.display.flip()

        self.engine.stop()
        if self.engine.is_game_over:
            print(f"Game over after {self.engine.tick_count} ticks.")
        pygame.quit()


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Dodge the gaps scrolling down the screen.")
    parser.add_argument("--seed", type=int, default=None, help="seed for obstacle placement")
    parser.add_argument("--verbose", "-v", action="store_true", help="enable debug logging")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    client = GapDodgeClient(seed=args.seed)
    client.run()


if __name__ == "__main__":
    main()
