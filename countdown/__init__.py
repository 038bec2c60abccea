"""countdown: pause-aware countdown timers

A Timer measures elapsed time from start(), freezes that accounting while
paused, and calls back once the configured target elapsed time is reached.

Responsibilities:
    - Elapsed and paused time accounting
    - Arming, re-arming and cancelling a single one-shot trigger
    - Ignoring calls that do not apply to the current state

Interactions:
    - Host code through the Timer API
    - A Clock supplying whole-second readings
    - A Scheduler supplying cancelable one-shot delayed calls
    - Logging system for diagnostics
"""

from countdown.core.errors import CountdownError, SchedulerError
from countdown.core.status import TimerStatus
from countdown.core.timer import Timer
from countdown.interfaces.protocols import Clock, Scheduler, TriggerHandle
from countdown.runtime.clock import MonotonicClock, WallClock
from countdown.runtime.scheduler import AsyncioScheduler, ThreadingScheduler

__version__ = "0.1.0"

__all__ = [
    "AsyncioScheduler",
    "Clock",
    "CountdownError",
    "MonotonicClock",
    "Scheduler",
    "SchedulerError",
    "ThreadingScheduler",
    "Timer",
    "TimerStatus",
    "TriggerHandle",
    "WallClock",
]
