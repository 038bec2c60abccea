# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from unittest.mock import MagicMock

import pytest

from countdown.core.timer import Timer
from tests.utils import FakeClock, FakeScheduler


def pytest_configure(config):
    """Register custom marks."""
    config.addinivalue_line("markers", "integration: runs against real schedulers and sleeps briefly")
    config.addinivalue_line("markers", "property: mark test as a property-based test")


@pytest.fixture
def clock():
    """A clock that only moves when advanced."""
    return FakeClock()


@pytest.fixture
def scheduler(clock):
    """A scheduler whose calls run only when the test turns the loop."""
    return FakeScheduler(clock)


@pytest.fixture
def callback():
    """A callback recording its invocations."""
    return MagicMock(name="callback", return_value=None)


@pytest.fixture
def timer(clock, scheduler):
    """An idle timer wired to the fake clock and scheduler."""
    return Timer(clock=clock, scheduler=scheduler, name="test")


@pytest.fixture
def started(timer, callback):
    """A timer started with the recording callback."""
    timer.start(callback)
    return timer
