import matplotlib

matplotlib.use("Agg")

import pytest

from percolation_stats import UniformRandom


class ScriptedRandom:
    """Random source that replays a fixed list of draws and records the bounds asked for."""

    def __init__(self, draws):
        self.draws = list(draws)
        self.bounds = []

    def uniform(self, k):
        self.bounds.append(k)
        return self.draws.pop(0)


class AlwaysFirst:
    def uniform(self, k):
        return 0


@pytest.fixture
def seeded_random():
    return UniformRandom(seed=3821)


@pytest.fixture
def always_first():
    return AlwaysFirst()


@pytest.fixture
def scripted_random():
    return ScriptedRandom
