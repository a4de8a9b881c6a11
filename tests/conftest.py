"""Shared test fixtures."""

from dataclasses import dataclass

import pytest


@dataclass
class FakeClock:
    """Clock whose epoch timestamp is set by the test."""

    _time: float = 0.0

    def now(self) -> float:
        return self._time

    def tick(self, seconds: float) -> None:
        self._time += seconds


@pytest.fixture
def clock():
    return FakeClock()
