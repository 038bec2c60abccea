"""
Runtime package: clocks and schedulers shipped with the library.

Any object satisfying the Clock or Scheduler protocol can replace these.
"""

from .clock import MonotonicClock, WallClock
from .scheduler import AsyncioScheduler, ThreadingScheduler

__all__ = ["AsyncioScheduler", "MonotonicClock", "ThreadingScheduler", "WallClock"]
