"""
Simulation backend: processes, queues, the MLFQ scheduler and its tooling.
"""

from .constants import Interrupt, QueueType, SchedulerConfig
from .core import (
    Process, ProcessState, SchedulerError, EmptyQueueError,
    UnknownInterruptError, SimulationTimeoutError,
)
from .clock import VirtualClock, WallClock
from .queues import Queue
from .scheduler import Scheduler

__all__ = [
    'Interrupt', 'QueueType', 'SchedulerConfig',
    'Process', 'ProcessState', 'SchedulerError', 'EmptyQueueError',
    'UnknownInterruptError', 'SimulationTimeoutError',
    'VirtualClock', 'WallClock', 'Queue', 'Scheduler',
]
