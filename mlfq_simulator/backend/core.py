"""
Core data structures for the MLFQ simulator.
Includes the Process entity, process states and scheduler errors.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional
import random


class ProcessState(Enum):
    """Process states in the system."""
    NEW = "NEW"
    READY = "READY"
    RUNNING = "RUNNING"
    BLOCKED = "BLOCKED"
    FINISHED = "FINISHED"


class SchedulerError(Exception):
    """Base class for scheduler failures."""


class EmptyQueueError(SchedulerError, IndexError):
    """Raised when dequeuing from an empty queue."""


class UnknownInterruptError(SchedulerError, ValueError):
    """Raised when the scheduler receives an interrupt it does not handle."""


class SimulationTimeoutError(SchedulerError):
    """Raised when a bounded run exceeds its tick budget."""


@dataclass(eq=False)
class Process:
    """A simulated process with one CPU burst followed by one blocking burst.

    Identity comparison is kept (``eq=False``) so the same process can be
    tracked across queues even if two processes share burst values.
    """
    pid: str
    cpu_time: float
    io_time: float = 0.0
    remaining_cpu: float = field(init=False)
    remaining_io: float = field(init=False)
    state: ProcessState = ProcessState.NEW
    admitted_at: Optional[float] = None
    completion_time: Optional[float] = None
    color: Optional[str] = None

    def __post_init__(self) -> None:
        if self.cpu_time < 0 or self.io_time < 0:
            raise ValueError("burst times must not be negative")
        self.remaining_cpu = float(self.cpu_time)
        self.remaining_io = float(self.io_time)
        if self.color is None:
            # Generate a stable color from pid
            rng = random.Random(self.pid)
            r = rng.randint(50, 220)
            g = rng.randint(50, 220)
            b = rng.randint(50, 220)
            self.color = f"#{r:02x}{g:02x}{b:02x}"

    def consume_cpu(self, amount: float) -> float:
        """Burn ``amount`` of the CPU burst and return what is left."""
        if amount < 0:
            raise ValueError("cannot consume a negative amount of CPU time")
        self.remaining_cpu = max(0.0, self.remaining_cpu - amount)
        return self.remaining_cpu

    def consume_io(self, amount: float) -> float:
        """Burn ``amount`` of the blocking burst and return what is left."""
        if amount < 0:
            raise ValueError("cannot consume a negative amount of I/O time")
        self.remaining_io = max(0.0, self.remaining_io - amount)
        return self.remaining_io

    @property
    def cpu_done(self) -> bool:
        return self.remaining_cpu <= 0

    @property
    def io_done(self) -> bool:
        return self.remaining_io <= 0

    def is_finished(self) -> bool:
        return self.cpu_done and self.io_done

    def __repr__(self) -> str:
        return (f"Process(pid={self.pid!r}, cpu={self.remaining_cpu:g}/{self.cpu_time:g}, "
                f"io={self.remaining_io:g}/{self.io_time:g}, state={self.state.name})")
