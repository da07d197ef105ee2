"""Shared pytest fixtures."""

import random

import pytest

from spades.engine import GameController
from spades.services.event_recorder import EventRecorder


class FixedRandom(random.Random):
    """Random source whose ``random()`` always returns the same value.

    Lets tests force the probabilistic branches of the bots.
    """

    def __init__(self, value: float) -> None:
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture
def rng():
    """Seeded random source for reproducible shuffles and bot choices."""
    return random.Random(1234)


@pytest.fixture
def always_low():
    """Random source that takes every 'with probability p' branch."""
    return FixedRandom(0.0)


@pytest.fixture
def always_high():
    """Random source that never takes a 'with probability p' branch."""
    return FixedRandom(0.99)


@pytest.fixture
def recorder():
    """Fresh event recorder."""
    return EventRecorder()


@pytest.fixture
def controller(recorder):
    """Controller with a seeded random source."""
    return GameController(rng=random.Random(42), recorder=recorder)
