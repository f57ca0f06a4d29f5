"""
Shared pytest fixtures: deterministic randomness and a manual clock.
"""

from datetime import datetime
from itertools import cycle
from typing import Iterable

import pytest

from config import reset_settings
from src.app_layer import dependencies
from src.simulation_layer.engine import GameEngine
from src.simulation_layer.runner import SimulatedClock

GAME_START = datetime(2025, 1, 15, 12, 0, 0)


class ScriptedRng:
    """Uniform [0, 1) stand-in that replays fixed values in a loop."""

    def __init__(self, values: Iterable[float]):
        self.values = list(values)
        self._cycle = cycle(self.values)
        self.calls = 0

    def __call__(self) -> float:
        self.calls += 1
        return next(self._cycle)


@pytest.fixture(autouse=True)
def _isolated_singletons():
    reset_settings()
    dependencies.reset_engine()
    yield
    dependencies.reset_engine()
    reset_settings()


@pytest.fixture
def clock() -> SimulatedClock:
    return SimulatedClock(GAME_START)


@pytest.fixture
def mid_rng() -> ScriptedRng:
    """Always 0.5: generation succeeds, every attribute roll is mid-range."""
    return ScriptedRng([0.5])


@pytest.fixture
def engine(mid_rng, clock) -> GameEngine:
    return GameEngine(rng=mid_rng, clock=clock.now, starting_cash=40)
