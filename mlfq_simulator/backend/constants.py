"""
Shared enums and default configuration values for the MLFQ simulator.
"""

from dataclasses import dataclass
from enum import Enum


class QueueType(Enum):
    """Kinds of queue owned by the scheduler."""
    CPU = "CPU"
    BLOCKING = "BLOCKING"


class Interrupt(Enum):
    """Interrupts a queue can raise to the scheduler.

    The queue and process involved are passed alongside the kind to
    ``Scheduler.handle_interrupt``, so the enum carries no payload itself.
    """
    PROCESS_BLOCKED = "PROCESS_BLOCKED"
    PROCESS_READY = "PROCESS_READY"
    LOWER_PRIORITY = "LOWER_PRIORITY"


PRIORITY_LEVELS = 3
BASE_QUANTUM = 10
QUANTUM_INCREMENT = 20
BLOCKING_QUANTUM = 50
GLOBAL_QUANTUM = 500


@dataclass
class SchedulerConfig:
    priority_levels: int = PRIORITY_LEVELS
    base_quantum: float = BASE_QUANTUM
    quantum_increment: float = QUANTUM_INCREMENT
    blocking_quantum: float = BLOCKING_QUANTUM
    global_quantum: float = GLOBAL_QUANTUM

    def __post_init__(self) -> None:
        if self.priority_levels < 1:
            raise ValueError("priority_levels must be at least 1")
        if self.base_quantum <= 0 or self.blocking_quantum <= 0 or self.global_quantum <= 0:
            raise ValueError("quanta must be positive")
        if self.quantum_increment < 0:
            raise ValueError("quantum_increment must not be negative")

    def quantum_for(self, level: int) -> float:
        """Quantum granted by the CPU queue at ``level``."""
        return self.base_quantum + level * self.quantum_increment
