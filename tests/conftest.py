"""Shared fixtures."""

from datetime import date, datetime, timedelta

import pytest

from carlog import Garage


class FakeClock:
    """Returns increasing timestamps, one second apart."""

    def __init__(self, start=datetime(2025, 3, 1, 8, 0)):
        self.now = start

    def __call__(self):
        current = self.now
        self.now += timedelta(seconds=1)
        return current


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def garage(clock):
    return Garage(today=lambda: date(2025, 6, 1), clock=clock)
