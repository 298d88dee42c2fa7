"""
Multi-level feedback queue scheduler.

The scheduler owns one blocking queue and ``priority_levels`` CPU queues
(level 0 runs first). Each tick it lets the blocking queue work off I/O,
then lets the highest-priority non-empty CPU queue run one process.
Queues report back through ``handle_interrupt``.
"""

from __future__ import annotations

from typing import List, Optional

from .clock import VirtualClock
from .constants import Interrupt, QueueType, SchedulerConfig
from .core import Process, ProcessState, SimulationTimeoutError, UnknownInterruptError
from .queues import Queue
from .utils import EventLogger


class Scheduler:
    def __init__(self, config: Optional[SchedulerConfig] = None, clock=None, logger: Optional[EventLogger] = None):
        self.config = config or SchedulerConfig()
        self.time_source = clock or VirtualClock()
        self.logger = logger or EventLogger()
        self.clock: float = self.time_source.now()
        self.global_quantum: float = self.config.global_quantum
        self.blocking_queue = Queue(self, self.config.blocking_quantum, 0, QueueType.BLOCKING)
        self.running_queues: List[Queue] = [
            Queue(self, self.config.quantum_for(level), level, QueueType.CPU)
            for level in range(self.config.priority_levels)
        ]
        self.ticks = 0
        self.boosts = 0
        self.finished: List[Process] = []

    def run(self, max_ticks: Optional[int] = None) -> int:
        """Tick until every queue is empty. Returns the number of ticks run."""
        start_ticks = self.ticks
        while not self.all_queues_empty():
            if max_ticks is not None and self.ticks - start_ticks >= max_ticks:
                raise SimulationTimeoutError(
                    f"{self.process_count()} processes still queued after {max_ticks} ticks")
            self.tick()
        return self.ticks - start_ticks

    def tick(self) -> None:
        now = self.time_source.now()
        time_slice = now - self.clock

        if not self.blocking_queue.is_empty():
            self.blocking_queue.do_blocking_work(time_slice)

        for queue in self.running_queues:
            if not queue.is_empty():
                queue.do_cpu_work(time_slice)
                break

        self.clock = now
        self.global_quantum -= time_slice
        self.ticks += 1

        if self.global_quantum <= 0:
            self.priority_boost()
            # Carry any overshoot into the next cycle
            while self.global_quantum <= 0:
                self.global_quantum += self.config.global_quantum

    def priority_boost(self) -> List[Process]:
        """Move every process in the lower queues to the tail of queue 0."""
        top = self.running_queues[0]
        moved: List[Process] = []
        for queue in self.running_queues[1:]:
            while not queue.is_empty():
                process = queue.dequeue()
                top.enqueue(process)
                moved.append(process)
        self.boosts += 1
        self.logger.log_boost(self.clock, [p.pid for p in moved])
        return moved

    def all_queues_empty(self) -> bool:
        if not self.blocking_queue.is_empty():
            return False
        return all(queue.is_empty() for queue in self.running_queues)

    def process_count(self) -> int:
        return len(self.blocking_queue) + sum(len(queue) for queue in self.running_queues)

    def add_new_process(self, process: Process) -> None:
        if process.admitted_at is None:
            process.admitted_at = self.clock
            self.logger.log_process_event(self.clock, process.pid, "admit", self.running_queues[0].label)
        process.state = ProcessState.READY
        self.running_queues[0].enqueue(process)

    def handle_interrupt(self, queue: Queue, process: Process, interrupt: Interrupt) -> None:
        if interrupt is Interrupt.PROCESS_BLOCKED:
            target = self.blocking_queue
            process.state = ProcessState.BLOCKED
            target.enqueue(process)
        elif interrupt is Interrupt.PROCESS_READY:
            target = self.running_queues[0]
            self.add_new_process(process)
        elif interrupt is Interrupt.LOWER_PRIORITY:
            level = queue.get_priority_level()
            if queue.get_queue_type() is QueueType.BLOCKING or level == len(self.running_queues) - 1:
                target = queue
            else:
                target = self.running_queues[level + 1]
            if target is not self.blocking_queue:
                process.state = ProcessState.READY
            target.enqueue(process)
        else:
            raise UnknownInterruptError(f"unknown interrupt {interrupt!r} from {queue.label}")

        self.logger.log_interrupt(self.clock, process.pid, interrupt.value, queue.label, target.label)

    def on_process_finished(self, queue: Queue, process: Process, time_s: float) -> None:
        process.state = ProcessState.FINISHED
        process.completion_time = time_s
        self.finished.append(process)
        self.logger.log_process_event(time_s, process.pid, "finish", queue.label)

    def get_cpu_queue(self, priority_level: int) -> Queue:
        return self.running_queues[priority_level]

    def get_blocking_queue(self) -> Queue:
        return self.blocking_queue
