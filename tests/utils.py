# tests/utils.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""
Deterministic stand-ins for the host clock and scheduler.
"""

from typing import Any, Callable, List


class FakeClock:
    """Whole-second clock that only moves when told to."""

    def __init__(self, start: int = 1000) -> None:
        self.current = start

    def now(self) -> int:
        return self.current

    def advance(self, seconds: int) -> None:
        self.current += seconds


class FakeHandle:
    def __init__(self, due: float, fn: Callable[[], Any]) -> None:
        self.due = due
        self.fn = fn
        self.cancelled = False
        self.ran = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeScheduler:
    """
    Records scheduled calls against a FakeClock and runs them on demand.

    run_due() plays the role of one event-loop turn: every live handle whose
    due time has passed runs, earliest first.
    """

    def __init__(self, clock: FakeClock) -> None:
        self.clock = clock
        self.handles: List[FakeHandle] = []

    def call_later(self, delay: float, fn: Callable[[], Any]) -> FakeHandle:
        handle = FakeHandle(self.clock.now() + delay, fn)
        self.handles.append(handle)
        return handle

    @property
    def pending(self) -> List[FakeHandle]:
        return [h for h in self.handles if not h.cancelled and not h.ran]

    def run_due(self) -> int:
        ran = 0
        for handle in sorted(self.pending, key=lambda h: h.due):
            if handle.due <= self.clock.now() and not handle.cancelled and not handle.ran:
                handle.ran = True
                handle.fn()
                ran += 1
        return ran

    def advance(self, seconds: int) -> None:
        """Move the clock one second at a time, running due calls at each step."""
        for _ in range(seconds):
            self.clock.advance(1)
            self.run_due()


class ImmediateScheduler(FakeScheduler):
    """A FakeScheduler that runs due calls inside call_later itself."""

    def call_later(self, delay: float, fn: Callable[[], Any]) -> FakeHandle:
        handle = super().call_later(delay, fn)
        if delay <= 0:
            handle.ran = True
            fn()
        return handle
