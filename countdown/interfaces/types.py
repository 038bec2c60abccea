# countdown/interfaces/types.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, Callable, Union

Timestamp = int
Seconds = Union[int, float]

# Callback Types
TimerCallback = Callable[[], Any]
ScheduledFunc = Callable[[], Any]
