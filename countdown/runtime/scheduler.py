# countdown/runtime/scheduler.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import asyncio
import inspect
import logging
import threading
from typing import Optional, Set

from countdown.core.errors import SchedulerError
from countdown.interfaces.protocols import TriggerHandle
from countdown.interfaces.types import ScheduledFunc, Seconds

logger = logging.getLogger(__name__)


class AsyncioScheduler:
    """
    Schedules one-shot calls on an asyncio event loop.

    Without an explicit loop, the loop running at arming time is used. A
    delay of zero or less is passed to loop.call_later unchanged, which runs
    the function on the next iteration of the loop.

    If the scheduled function returns an awaitable (as a timer does for an
    ``async def`` callback), it is run as a task on the same loop.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop
        self._tasks: Set[asyncio.Future] = set()

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is not None:
            return self._loop
        try:
            return asyncio.get_running_loop()
        except RuntimeError as e:
            raise SchedulerError("AsyncioScheduler requires a running event loop or an explicit loop") from e

    def call_later(self, delay: Seconds, fn: ScheduledFunc) -> TriggerHandle:
        loop = self._get_loop()

        def _run() -> None:
            result = fn()
            if inspect.isawaitable(result):
                task = asyncio.ensure_future(result, loop=loop)
                # Hold a reference until done, the loop only keeps weak ones
                self._tasks.add(task)
                task.add_done_callback(self._on_task_done)

        logger.debug("Scheduling call in %ss on %r", delay, loop)
        return loop.call_later(delay, _run)

    def _on_task_done(self, task: asyncio.Future) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error("Timer callback task failed: %s", error, exc_info=error)


class ThreadingScheduler:
    """
    Schedules one-shot calls on threading.Timer worker threads.

    The scheduled function runs on the worker thread, so whatever it touches
    must be thread-safe. Timer takes its own lock around the fire path.
    """

    def __init__(self, daemon: bool = True) -> None:
        self._daemon = daemon

    def call_later(self, delay: Seconds, fn: ScheduledFunc) -> TriggerHandle:
        timer = threading.Timer(max(0.0, float(delay)), fn)
        timer.daemon = self._daemon
        logger.debug("Scheduling call in %ss on thread %s", delay, timer.name)
        timer.start()
        return timer
