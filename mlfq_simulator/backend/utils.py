from __future__ import annotations

from typing import List, Dict, Optional, Any
import json
import csv

from .core import Process


class EventLogger:
    def __init__(self) -> None:
        self.process_events: List[Dict[str, Any]] = []
        self.interrupts: List[Dict[str, Any]] = []
        self.boosts: List[Dict[str, Any]] = []
        self.timeline: List[Dict[str, Any]] = []

    def log_process_event(self, time_s: float, pid: str, event: str, queue: Optional[str] = None) -> None:
        self.process_events.append({
            "time": time_s,
            "pid": pid,
            "event": event,
            "queue": queue,
        })

    def log_interrupt(self, time_s: float, pid: str, interrupt: str, source: str, target: str) -> None:
        self.interrupts.append({
            "time": time_s,
            "pid": pid,
            "interrupt": interrupt,
            "from": source,
            "to": target,
        })

    def log_boost(self, time_s: float, moved: List[str]) -> None:
        self.boosts.append({
            "time": time_s,
            "moved": list(moved),
        })

    def log_timeline_slice(self, start: float, end: float, pid: str, queue: str, kind: str = "cpu") -> None:
        self.timeline.append({
            "start": start,
            "end": end,
            "pid": pid,
            "queue": queue,
            "kind": kind,
        })

    def export_json(self, path: str) -> None:
        data = {
            "process_events": self.process_events,
            "interrupts": self.interrupts,
            "boosts": self.boosts,
            "timeline": self.timeline,
        }
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

    def export_csv(self, base_path_no_ext: str) -> None:
        with open(f"{base_path_no_ext}_events.csv", "w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=["time", "pid", "event", "queue"])
            writer.writeheader()
            for row in self.process_events:
                writer.writerow(row)
        with open(f"{base_path_no_ext}_interrupts.csv", "w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=["time", "pid", "interrupt", "from", "to"])
            writer.writeheader()
            for row in self.interrupts:
                writer.writerow(row)
        with open(f"{base_path_no_ext}_timeline.csv", "w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=["start", "end", "pid", "queue", "kind"])
            writer.writeheader()
            for row in self.timeline:
                writer.writerow(row)


def compute_turnaround_times(processes: List[Process]) -> Dict[str, float]:
    tat: Dict[str, float] = {}
    for p in processes:
        if p.completion_time is None or p.admitted_at is None:
            continue
        tat[p.pid] = max(0.0, p.completion_time - p.admitted_at)
    return tat


def compute_waiting_times(processes: List[Process]) -> Dict[str, float]:
    # Time spent neither running nor blocked
    waiting: Dict[str, float] = {}
    for p in processes:
        if p.completion_time is None or p.admitted_at is None:
            continue
        turnaround = p.completion_time - p.admitted_at
        waiting[p.pid] = max(0.0, turnaround - p.cpu_time - p.io_time)
    return waiting


def compute_avg(values: List[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def compute_throughput(processes: List[Process], total_time: float) -> float:
    if total_time <= 0:
        return 0.0
    completed = len([p for p in processes if p.completion_time is not None])
    return completed / total_time
