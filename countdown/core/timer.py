# countdown/core/timer.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from threading import RLock
from typing import Any, Optional

from countdown.core.status import TimerStatus
from countdown.interfaces.protocols import Clock, Scheduler, TriggerHandle
from countdown.interfaces.types import Seconds, Timestamp, TimerCallback
from countdown.runtime.clock import WallClock
from countdown.runtime.scheduler import AsyncioScheduler

logger = logging.getLogger(__name__)


class _PendingTrigger:
    """
    Binds a scheduler handle to the arming that created it, so a fire from a
    superseded arming can be told apart from the current one.
    """

    __slots__ = ("handle",)

    def __init__(self) -> None:
        self.handle: Optional[TriggerHandle] = None

    def cancel(self) -> None:
        if self.handle is not None:
            self.handle.cancel()


class Timer:
    """
    Pause-aware countdown that invokes a callback once its target elapsed
    time is reached.

    Elapsed time is measured from start() and excludes every period spent
    paused. The target is set, moved or cleared with update(); the callback
    fires once per arming, and a later update() may arm it again even after
    it fired.

    Calls that make no sense in the current state (pause before start,
    resume while running, ...) are ignored rather than rejected.

    Class Invariants:
    1. started_at is None iff the timer is idle
    2. paused_at is set only while started_at is set
    3. paused_total only grows, and only in resume()
    4. At most one trigger is pending at any time
    """

    def __init__(
        self,
        clock: Optional[Clock] = None,
        scheduler: Optional[Scheduler] = None,
        name: Optional[str] = None,
    ) -> None:
        """
        Create an idle timer.

        :param clock: Time source, WallClock by default.
        :param scheduler: One-shot scheduler, AsyncioScheduler by default.
        :param name: Optional label used in logs and repr.
        """
        self._clock = clock if clock is not None else WallClock()
        self._scheduler = scheduler if scheduler is not None else AsyncioScheduler()
        self._name = name or hex(id(self))
        self._lock = RLock()

        self._callback: Optional[TimerCallback] = None
        self._pending: Optional[_PendingTrigger] = None
        self._target: Optional[Seconds] = None
        self._started_at: Optional[Timestamp] = None
        self._paused_at: Optional[Timestamp] = None
        self._paused_total: int = 0
        self._triggered: bool = False

    def __repr__(self) -> str:
        with self._lock:
            return (
                f"<Timer {self._name} status={self.status.name} elapsed={self.get_elapsed()} "
                f"target={self._target} triggered={self._triggered}>"
            )

    @property
    def name(self) -> str:
        return self._name

    @property
    def status(self) -> TimerStatus:
        """Get the current lifecycle status."""
        with self._lock:
            if self._started_at is None:
                return TimerStatus.IDLE
            if self._paused_at is not None:
                return TimerStatus.PAUSED
            return TimerStatus.RUNNING

    @property
    def target(self) -> Optional[Seconds]:
        """Get the configured target in seconds, or None."""
        return self._target

    @property
    def is_armed(self) -> bool:
        """True while a trigger is pending with the scheduler."""
        return self._pending is not None

    def start(self, callback: TimerCallback) -> None:
        """
        Reset any previous run and start counting from now.

        No trigger is armed until update() sets a target.

        :param callback: Called with no arguments when the target is reached.
        """
        with self._lock:
            self.reset()
            self._started_at = self._clock.now()
            self._callback = callback
            logger.debug("Timer %s started at %s", self._name, self._started_at)

    def pause(self) -> None:
        """
        Freeze elapsed time and cancel the pending trigger.

        Ignored unless the timer is running.
        """
        with self._lock:
            if self._started_at is None or self._paused_at is not None:
                logger.debug("Timer %s: pause ignored in status %s", self._name, self.status.name)
                return
            self._paused_at = self._clock.now()
            self._clear_trigger()
            logger.debug("Timer %s paused at %s", self._name, self._paused_at)

    def resume(self) -> None:
        """
        Continue counting after pause() and re-arm for the remaining time.

        The trigger is only re-armed if the callback has not fired yet and a
        target is set. Ignored unless the timer is paused.
        """
        with self._lock:
            if self._started_at is None or self._paused_at is None:
                logger.debug("Timer %s: resume ignored in status %s", self._name, self.status.name)
                return
            self._paused_total += self._clock.now() - self._paused_at
            self._paused_at = None
            logger.debug("Timer %s resumed, %ss spent paused", self._name, self._paused_total)

            if not self._triggered and self._target is not None:
                self._set_trigger(self._target - self.get_elapsed())

    def update(self, seconds: Optional[Seconds]) -> None:
        """
        Set the elapsed time at which the callback fires.

        Time already elapsed is kept, so a target at or below it fires on the
        scheduler's next turn. While paused, arming waits for resume().
        Passing None removes the target: the timer keeps counting but never
        fires.

        Whether the callback already fired is intentionally not checked, so
        extending the target of a fired timer makes it fire again.

        Ignored unless the timer was started.

        :param seconds: Target elapsed seconds, or None for no target.
        """
        with self._lock:
            if self._started_at is None:
                logger.debug("Timer %s: update ignored, not started", self._name)
                return
            self._target = seconds
            logger.debug("Timer %s target set to %s", self._name, seconds)

            if seconds is None:
                self._clear_trigger()
            elif self._paused_at is None:
                self._set_trigger(seconds - self.get_elapsed())

    def get_elapsed(self) -> int:
        """
        Return seconds elapsed since start(), not counting time paused.

        An idle timer reports 0.
        """
        with self._lock:
            if self._started_at is None:
                return 0
            now = self._clock.now()
            elapsed = now - self._started_at - self._paused_total
            if self._paused_at is not None:
                elapsed -= now - self._paused_at
            return elapsed

    def has_triggered(self) -> bool:
        """Check whether the callback fired since the last start()."""
        return self._triggered

    def get_remaining_seconds(self) -> Optional[Seconds]:
        """
        Return target minus elapsed seconds, or None if no target is set.

        Overdue timers report a negative value.
        """
        with self._lock:
            if self._target is None:
                return None
            return self._target - self.get_elapsed()

    def reset(self) -> None:
        """Cancel any pending trigger and return to the idle state."""
        with self._lock:
            self._clear_trigger()
            self._target = None
            self._started_at = None
            self._paused_at = None
            self._paused_total = 0
            self._callback = None
            self._triggered = False

    def _set_trigger(self, delay: Seconds) -> None:
        self._clear_trigger()
        trigger = _PendingTrigger()
        # Pending before call_later, a scheduler may fire before it returns
        self._pending = trigger
        try:
            trigger.handle = self._scheduler.call_later(delay, lambda: self._fire(trigger))
        except Exception:
            if self._pending is trigger:
                self._pending = None
            raise
        logger.debug("Timer %s armed to fire in %ss", self._name, delay)

    def _clear_trigger(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
            logger.debug("Timer %s trigger cancelled", self._name)

    def _fire(self, trigger: _PendingTrigger) -> Any:
        """
        Run the callback for trigger unless it was superseded.

        The callback runs with the lock held, so once reset(), start() or
        pause() returns on another thread, the cancelled callback can no
        longer start. A callback must not block on a thread that is itself
        waiting on this timer.
        """
        with self._lock:
            # A cancelled handle can still be delivered by a threaded scheduler
            if trigger is not self._pending:
                logger.debug("Timer %s: superseded trigger ignored", self._name)
                return None
            self._pending = None
            self._triggered = True

            logger.debug("Timer %s triggered", self._name)
            if self._callback is None:
                return None
            return self._callback()
