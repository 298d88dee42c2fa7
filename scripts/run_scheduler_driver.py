from __future__ import annotations
import os, sys
SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.abspath(os.path.join(SCRIPT_DIR, os.pardir))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from mlfq_simulator.backend.clock import VirtualClock
from mlfq_simulator.backend.core import Process
from mlfq_simulator.backend.scheduler import Scheduler


def make_processes():
    return [
        Process(pid="A", cpu_time=5),
        Process(pid="B", cpu_time=25),
        Process(pid="C", cpu_time=5, io_time=20),
        Process(pid="D", cpu_time=120, io_time=30),
        Process(pid="E", cpu_time=60),
    ]


def snapshot(scheduler: Scheduler) -> str:
    parts = [f"{q.label}={[p.pid for p in q]}" for q in scheduler.running_queues]
    parts.append(f"{scheduler.blocking_queue.label}={[p.pid for p in scheduler.blocking_queue]}")
    # Head of the first non-empty CPU queue runs on the next tick
    head = next((q.peek() for q in scheduler.running_queues if not q.is_empty()), None)
    parts.append(f"next={head.pid if head else '-'}")
    return " ".join(parts)


def run():
    scheduler = Scheduler(clock=VirtualClock(step=10.0))
    for p in make_processes():
        scheduler.add_new_process(p)

    # Step tick by tick so queue contents can be shown between ticks
    print(f"t={scheduler.clock:6.1f} {snapshot(scheduler)}")
    while not scheduler.all_queues_empty():
        scheduler.tick()
        print(f"t={scheduler.clock:6.1f} {snapshot(scheduler)}")
        if scheduler.ticks > 1000:
            break

    print('Finished order:', [p.pid for p in scheduler.finished])
    print('Boosts:', scheduler.boosts)
    for p in scheduler.finished:
        print(f'PID {p.pid}: admitted={p.admitted_at:.1f}, completion={p.completion_time:.1f}')

if __name__ == '__main__':
    run()
