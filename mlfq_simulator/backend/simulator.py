from __future__ import annotations

from typing import List, Optional, Dict
from dataclasses import dataclass

import pandas as pd

from .constants import SchedulerConfig
from .core import Process
from .scheduler import Scheduler
from .utils import EventLogger, compute_waiting_times, compute_turnaround_times, compute_avg, compute_throughput


@dataclass
class SimulationResult:
    processes: List[Process]
    total_time: float
    ticks: int
    boosts: int
    turnaround_times: Dict[str, float]
    waiting_times: Dict[str, float]
    avg_turnaround_time: float
    avg_waiting_time: float
    throughput: float
    logger: EventLogger

    def summary_frame(self) -> pd.DataFrame:
        """One row per process with its bursts and completion metrics."""
        rows = []
        for p in self.processes:
            rows.append({
                "pid": p.pid,
                "cpu_time": p.cpu_time,
                "io_time": p.io_time,
                "admitted_at": p.admitted_at,
                "completion_time": p.completion_time,
                "turnaround": self.turnaround_times.get(p.pid),
                "waiting": self.waiting_times.get(p.pid),
            })
        columns = ["pid", "cpu_time", "io_time", "admitted_at", "completion_time", "turnaround", "waiting"]
        return pd.DataFrame(rows, columns=columns).set_index("pid")


def simulate(
    processes: List[Process],
    config: Optional[SchedulerConfig] = None,
    clock=None,
    max_ticks: Optional[int] = None,
) -> SimulationResult:
    scheduler = Scheduler(config=config, clock=clock)
    start = scheduler.clock
    for p in processes:
        scheduler.add_new_process(p)

    ticks = scheduler.run(max_ticks=max_ticks)
    total_time = scheduler.clock - start

    turnaround_times = compute_turnaround_times(processes)
    waiting_times = compute_waiting_times(processes)

    return SimulationResult(
        processes=processes,
        total_time=total_time,
        ticks=ticks,
        boosts=scheduler.boosts,
        turnaround_times=turnaround_times,
        waiting_times=waiting_times,
        avg_turnaround_time=compute_avg(list(turnaround_times.values())),
        avg_waiting_time=compute_avg(list(waiting_times.values())),
        throughput=compute_throughput(processes, total_time),
        logger=scheduler.logger,
    )
