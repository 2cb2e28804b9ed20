"""
Pytest fixtures for Canvas Adventure tests.
"""
import os
import random

import pytest

# Headless pygame for renderer and input tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from canvas_adventure.gameplay.game import Game
from canvas_adventure.gameplay.history import HistoryRecorder, MemoryStore


class FakeClock:
    """Manually advanced monotonic clock (seconds)."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def recorder(store):
    return HistoryRecorder(store)


@pytest.fixture
def game(clock, rng, recorder):
    return Game(rng=rng, clock=clock, history=recorder)
