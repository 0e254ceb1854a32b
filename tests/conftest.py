import random

import pytest


class FakeHost:
    """Stands in for the Tk event loop's ``after``/``after_cancel`` timer API."""

    def __init__(self):
        self.pending = {}
        self.cancelled = []
        self._count = 0

    def after(self, ms, func):
        self._count += 1
        handle = f"after#{self._count}"
        self.pending[handle] = (ms, func)
        return handle

    def after_cancel(self, handle):
        self.pending.pop(handle, None)
        self.cancelled.append(handle)

    @property
    def delays(self):
        return [ms for ms, _ in self.pending.values()]

    def fire(self):
        """Run the oldest pending callback."""
        handle = next(iter(self.pending))
        _, func = self.pending.pop(handle)
        func()


class StubRandom:
    """Returns scripted values from ``random()``."""

    def __init__(self, *values):
        self.values = list(values)

    def random(self):
        return self.values.pop(0)


@pytest.fixture
def host():
    return FakeHost()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def scripted_rng():
    """Factory for an RNG that replays the given ``random()`` values."""
    return StubRandom
