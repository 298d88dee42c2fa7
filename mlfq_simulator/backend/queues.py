"""
FIFO process queue used at every level of the MLFQ scheduler.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterator, Optional, TYPE_CHECKING

from .constants import Interrupt, QueueType
from .core import EmptyQueueError, Process, ProcessState

if TYPE_CHECKING:
    from .scheduler import Scheduler


class Queue:
    """A FIFO of processes sharing one quantum.

    The queue keeps a back-reference to its scheduler, but only uses it to
    raise interrupts and to report finished processes; the scheduler owns
    the queue and decides where an interrupted process goes next.
    """

    def __init__(self, scheduler: "Scheduler", quantum: float, priority_level: int, queue_type: QueueType):
        self.scheduler = scheduler
        self.quantum = quantum
        self.priority_level = priority_level
        self.queue_type = queue_type
        self.processes: Deque[Process] = deque()

    @property
    def label(self) -> str:
        if self.queue_type is QueueType.BLOCKING:
            return "BLOCKING"
        return f"Q{self.priority_level}"

    def enqueue(self, process: Process) -> None:
        self.processes.append(process)

    def dequeue(self) -> Process:
        if not self.processes:
            raise EmptyQueueError(f"cannot dequeue from empty queue {self.label}")
        return self.processes.popleft()

    def peek(self) -> Optional[Process]:
        return self.processes[0] if self.processes else None

    def is_empty(self) -> bool:
        return not self.processes

    def get_priority_level(self) -> int:
        return self.priority_level

    def get_queue_type(self) -> QueueType:
        return self.queue_type

    def __len__(self) -> int:
        return len(self.processes)

    def __iter__(self) -> Iterator[Process]:
        return iter(list(self.processes))

    def __repr__(self) -> str:
        return f"Queue({self.label}, quantum={self.quantum:g}, pids={[p.pid for p in self.processes]})"

    def do_cpu_work(self, time_slice: float) -> None:
        """Run the head process for at most one quantum of ``time_slice``."""
        if time_slice <= 0 or self.is_empty():
            return
        process = self.dequeue()
        process.state = ProcessState.RUNNING
        granted = min(self.quantum, time_slice)
        used = min(granted, process.remaining_cpu)
        process.consume_cpu(granted)
        self._log_slice(process, used, "cpu")

        if not process.cpu_done:
            self.scheduler.handle_interrupt(self, process, Interrupt.LOWER_PRIORITY)
        elif process.is_finished():
            self.scheduler.on_process_finished(self, process, self.scheduler.clock + used)
        else:
            self.scheduler.handle_interrupt(self, process, Interrupt.PROCESS_BLOCKED)

    def do_blocking_work(self, time_slice: float) -> None:
        """Let the head process wait on I/O for at most one quantum."""
        if time_slice <= 0 or self.is_empty():
            return
        process = self.dequeue()
        granted = min(self.quantum, time_slice)
        used = min(granted, process.remaining_io)
        process.consume_io(granted)
        self._log_slice(process, used, "io")

        if process.io_done:
            self.scheduler.handle_interrupt(self, process, Interrupt.PROCESS_READY)
        else:
            self.scheduler.handle_interrupt(self, process, Interrupt.LOWER_PRIORITY)

    def _log_slice(self, process: Process, used: float, kind: str) -> None:
        # A turn with nothing left to burn leaves no trace on the timeline
        if used <= 0:
            return
        start = self.scheduler.clock
        self.scheduler.logger.log_timeline_slice(start, start + used, process.pid, self.label, kind)
