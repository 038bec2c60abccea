# countdown/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details


class CountdownError(Exception):
    """
    Base exception class for errors within the countdown library.
    """


class SchedulerError(CountdownError):
    """
    Raised when a scheduler cannot arm a trigger, e.g. an asyncio scheduler
    asked to arm outside of a running event loop.
    """
