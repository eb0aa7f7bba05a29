import os
import random

import pytest

os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


class FakeClock:
    """Stands in for time.time so tests can move time without sleeping."""
    def __init__(self, start=1_000_000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class FixedRandom(random.Random):
    """random() always returns the same value; choice() still works."""
    def __init__(self, value):
        super().__init__(0)
        self.value = value

    def random(self):
        return self.value


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def never_ill():
    return FixedRandom(0.999)


@pytest.fixture
def always_ill():
    return FixedRandom(0.0)
