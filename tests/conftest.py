import random

import pytest

from pwstrength import create_app
from pwstrength.ratelimit import limiter


class SeededSource:
    """Deterministic stand-in for the system random source."""

    def __init__(self, seed=1234):
        self._rng = random.Random(seed)
        self.calls = 0

    def randbelow(self, bound):
        self.calls += 1
        return self._rng.randrange(bound)


class ConstantSource:
    """Always returns the same index; used to force degenerate sampling."""

    def __init__(self, value=0):
        self.value = value
        self.calls = 0

    def randbelow(self, bound):
        self.calls += 1
        return self.value % bound


@pytest.fixture
def seeded_source():
    return SeededSource()


@pytest.fixture
def app():
    app = create_app('pwstrength.config.TestingConfig')
    with app.app_context():
        limiter.reset()
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def constant_source():
    return ConstantSource()


@pytest.fixture
def make_source():
    return SeededSource
