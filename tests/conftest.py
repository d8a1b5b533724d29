import random

import pytest


class ScriptedRandom(random.Random):
    """random() cycles through a fixed list of values."""

    def __init__(self, values):
        super().__init__(0)
        self._values = list(values)
        self._index = 0

    def random(self):
        value = self._values[self._index % len(self._values)]
        self._index += 1
        return value


@pytest.fixture
def scripted_rng():
    return ScriptedRandom
