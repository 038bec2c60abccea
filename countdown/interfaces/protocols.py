# countdown/interfaces/protocols.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Protocol, runtime_checkable

from countdown.interfaces.types import ScheduledFunc, Seconds, Timestamp


@runtime_checkable
class Clock(Protocol):
    """
    Clock protocol for type checking.

    Methods:
        now(): Returns the current time in whole seconds.

    Runtime Invariants:
    - Readings share a fixed epoch for the lifetime of a timer, so that
      subtracting two readings yields the seconds between them.
    """

    def now(self) -> Timestamp:
        """Get the current time in whole seconds since the clock's epoch."""
        ...


@runtime_checkable
class TriggerHandle(Protocol):
    """
    A live registration with a Scheduler.

    Runtime Invariants:
    - cancel() is idempotent and may be called after the function already ran.
    """

    def cancel(self) -> None:
        """Prevent the scheduled function from running, if it has not yet."""
        ...


@runtime_checkable
class Scheduler(Protocol):
    """
    One-shot delayed-callback scheduler protocol.

    Methods:
        call_later(delay, fn): Run fn once after delay seconds.

    Runtime Invariants:
    - A delay of zero or less is never rejected: fn runs as soon as the host
      loop next turns, or immediately, before call_later returns.
    - fn runs at most once per call, and never after its handle is cancelled.

    Error Handling:
    - Implementations raise SchedulerError when they cannot arm at all.
    """

    def call_later(self, delay: Seconds, fn: ScheduledFunc) -> TriggerHandle:
        """Schedule fn to run once after delay seconds and return its handle."""
        ...
