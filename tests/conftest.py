import random

import pytest

from gapdodge.config import GameConfig
from gapdodge.game_engine import GameEngine
from gapdodge.input_state import InputState
from gapdodge.scheduler import FixedStepScheduler


class RecordingRenderer:
    """Keeps every snapshot it is handed instead of drawing it."""

    def __init__(self):
        self.frames = []
        self.destroyed = False

    def render(self, snapshot):
        self.frames.append(snapshot)

    def destroy(self):
        self.destroyed = True


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def inputs():
    return InputState()


@pytest.fixture
def scheduler():
    return FixedStepScheduler()


@pytest.fixture
def engine(renderer, inputs, scheduler, config):
    return GameEngine(renderer, inputs, scheduler, config, rng=random.Random(1234))
