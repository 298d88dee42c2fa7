from __future__ import annotations

import argparse
from typing import List
import os
import random
import sys

from colorama import Fore, init as colorama_init

# Ensure repo root is on sys.path when running as a script
SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))
REPO_ROOT = os.path.abspath(os.path.join(SCRIPT_DIR, os.pardir, os.pardir))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from mlfq_simulator.backend.clock import VirtualClock, WallClock
from mlfq_simulator.backend.constants import SchedulerConfig
from mlfq_simulator.backend.core import Process, SchedulerError
from mlfq_simulator.backend.simulator import simulate
from mlfq_simulator.backend.visualizer import plot_timeline


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Multi-level feedback queue scheduler simulator")
    p.add_argument("--n", type=int, default=10, help="Number of synthetic processes")
    p.add_argument("--seed", type=int, default=42)
    p.add_argument("--levels", type=int, default=SchedulerConfig.priority_levels, help="Number of CPU priority levels")
    p.add_argument("--base-quantum", type=float, default=SchedulerConfig.base_quantum)
    p.add_argument("--quantum-increment", type=float, default=SchedulerConfig.quantum_increment)
    p.add_argument("--blocking-quantum", type=float, default=SchedulerConfig.blocking_quantum)
    p.add_argument("--boost", type=float, default=SchedulerConfig.global_quantum, help="Global quantum between priority boosts")
    p.add_argument("--clock", choices=["virtual", "wall"], default="virtual")
    p.add_argument("--step", type=float, default=10.0, help="Virtual clock advance per tick")
    p.add_argument("--max-ticks", type=int, default=None)
    p.add_argument("--out", type=str, default=None, help="Save timeline chart to this path")
    p.add_argument("--log", type=str, default=None, help="Base path for JSON/CSV event logs")
    return p.parse_args(argv)


def generate_workload(n: int, seed: int) -> List[Process]:
    rng = random.Random(seed)
    procs: List[Process] = []
    for i in range(n):
        cpu = round(max(1.0, rng.expovariate(1 / 40)), 1)
        # Roughly half the jobs do some I/O after their CPU burst
        io = round(rng.expovariate(1 / 60), 1) if rng.random() < 0.5 else 0.0
        procs.append(Process(pid=f"P{i+1}", cpu_time=cpu, io_time=io))
    return procs


def main(argv: List[str] | None = None) -> int:
    colorama_init(autoreset=True)
    args = parse_args(argv)
    try:
        config = SchedulerConfig(
            priority_levels=args.levels,
            base_quantum=args.base_quantum,
            quantum_increment=args.quantum_increment,
            blocking_quantum=args.blocking_quantum,
            global_quantum=args.boost,
        )
        clock = VirtualClock(step=args.step) if args.clock == "virtual" else WallClock()
        procs = generate_workload(args.n, args.seed)
        result = simulate(procs, config=config, clock=clock, max_ticks=args.max_ticks)
    except (SchedulerError, ValueError) as e:
        print(Fore.RED + f"Simulation failed: {e}")
        return 1

    print(result.summary_frame().to_string())
    print(f"Ticks: {result.ticks}, Boosts: {result.boosts}, Total time: {result.total_time:.2f}")
    print(f"Avg waiting: {result.avg_waiting_time:.3f}, Avg turnaround: {result.avg_turnaround_time:.3f}, Throughput: {result.throughput:.4f}")
    if args.out:
        plot_timeline(procs, result.logger, args.out)
        print(Fore.CYAN + f"Saved plot to {args.out}")
    if args.log:
        result.logger.export_json(f"{args.log}.json")
        result.logger.export_csv(args.log)
        print(Fore.CYAN + f"Logs written to {args.log}.json and {args.log}_*.csv")
    return 0


if __name__ == "__main__":
    sys.exit(main())
