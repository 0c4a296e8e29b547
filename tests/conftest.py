"""Shared fixtures for the SNEK test suite."""

from __future__ import annotations

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest  # noqa: E402


class FakeClock:
    """Manually advanced stand-in for ``time.monotonic``."""

    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class ScriptedRng:
    """Hands out pre-chosen values from ``uniform`` so apple spots are known."""

    def __init__(self, values: list[float]) -> None:
        self._values = list(values)
        self.calls = 0

    def uniform(self, a: float, b: float) -> float:
        self.calls += 1
        if not self._values:
            return (a + b) / 2
        return self._values.pop(0)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def rng() -> ScriptedRng:
    # Apple spots, two values per respawn, all far from the starting body.
    return ScriptedRng([900.0, 500.0, 1100.0, 650.0, 700.0, 600.0, 1000.0, 300.0])
