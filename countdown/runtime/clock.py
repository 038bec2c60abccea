# countdown/runtime/clock.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import time

from countdown.interfaces.types import Timestamp


class WallClock:
    """
    Reads the system wall clock, rounded to whole seconds.

    Adjustments to the system time while a timer runs are not compensated
    for; use MonotonicClock where that matters.
    """

    def now(self) -> Timestamp:
        return round(time.time())


class MonotonicClock:
    """
    Reads time.monotonic(), rounded to whole seconds. Its epoch is arbitrary,
    so readings are only meaningful relative to each other.
    """

    def now(self) -> Timestamp:
        return round(time.monotonic())
