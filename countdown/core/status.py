# countdown/core/status.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from enum import Enum, auto


class TimerStatus(Enum):
    """Defines the possible states of a timer.

    Whether the callback already fired is tracked separately, see
    Timer.has_triggered().
    """

    IDLE = auto()  # Not started, or reset
    RUNNING = auto()  # Counting elapsed time
    PAUSED = auto()  # Elapsed time frozen
