from __future__ import annotations

import shlex
from typing import List, Optional
from colorama import Fore, Style, init as colorama_init

from .clock import VirtualClock
from .constants import SchedulerConfig
from .core import Process, SchedulerError
from .simulator import simulate
from .visualizer import plot_timeline


class ManualTerminal:
    def __init__(self) -> None:
        colorama_init(autoreset=True)
        self.processes: List[Process] = []
        self.last_result = None

    def prompt(self) -> None:
        print(Fore.CYAN + "MLFQ Terminal. Type 'help' for commands.")
        while True:
            try:
                raw = input(Fore.GREEN + "> ")
            except (EOFError, KeyboardInterrupt):
                print()
                break
            if not raw.strip():
                continue
            self.handle_command(raw)

    def handle_command(self, raw: str) -> None:
        try:
            parts = shlex.split(raw)
        except ValueError as e:
            print(Fore.RED + f"Parse error: {e}")
            return
        if not parts:
            return
        cmd, *args = parts
        cmd = cmd.lower()
        if cmd == "help":
            self._help()
        elif cmd == "add":
            self._add(args)
        elif cmd == "list":
            self._list()
        elif cmd == "run":
            self._run(args)
        elif cmd == "stats":
            self._stats()
        elif cmd == "exit" or cmd == "quit":
            raise SystemExit(0)
        else:
            print(Fore.YELLOW + "Unknown command. Type 'help'.")

    def _help(self) -> None:
        print("Commands:")
        print("  add <pid> <cpu> [io=0]")
        print("  list")
        print("  run [--levels P] [--step S] [--boost G] [--max-ticks N] [--out path]")
        print("  stats")
        print("  exit")

    def _add(self, args: List[str]) -> None:
        if len(args) < 2:
            print(Fore.RED + "Usage: add <pid> <cpu> [io]")
            return
        pid = args[0]
        try:
            cpu = float(args[1])
            io = float(args[2]) if len(args) >= 3 else 0.0
            process = Process(pid=pid, cpu_time=cpu, io_time=io)
        except ValueError as e:
            print(Fore.RED + f"Invalid values: {e}")
            return
        self.processes.append(process)
        print(Fore.CYAN + f"Process {pid} added: cpu={cpu:g}, io={io:g}")

    def _list(self) -> None:
        if not self.processes:
            print("No processes yet")
            return
        for p in self.processes:
            print(f"{p.pid}: cpu={p.cpu_time:g}, io={p.io_time:g}")

    def _run(self, args: List[str]) -> None:
        levels = SchedulerConfig.priority_levels
        step = 10.0
        boost = SchedulerConfig.global_quantum
        max_ticks: Optional[int] = None
        out_path: Optional[str] = None
        it = iter(args)
        try:
            for token in it:
                if token == "--levels":
                    levels = int(next(it))
                elif token == "--step":
                    step = float(next(it))
                elif token == "--boost":
                    boost = float(next(it))
                elif token == "--max-ticks":
                    max_ticks = int(next(it))
                elif token == "--out":
                    out_path = next(it, None)
        except (StopIteration, ValueError):
            print(Fore.RED + "Invalid run flags. Type 'help'.")
            return

        if not self.processes:
            print(Fore.YELLOW + "No processes to run")
            return

        procs = [Process(pid=p.pid, cpu_time=p.cpu_time, io_time=p.io_time) for p in self.processes]
        try:
            config = SchedulerConfig(priority_levels=levels, global_quantum=boost)
            result = simulate(procs, config=config, clock=VirtualClock(step=step), max_ticks=max_ticks)
        except (SchedulerError, ValueError) as e:
            print(Fore.RED + f"Simulation failed: {e}")
            return

        self.last_result = result
        print(Style.BRIGHT + f"Simulation finished in {result.ticks} ticks. Avg turnaround: {result.avg_turnaround_time:.2f}, Avg waiting: {result.avg_waiting_time:.2f}, Boosts: {result.boosts}")
        if out_path:
            plot_timeline(procs, result.logger, out_path)
            print(Fore.CYAN + f"Saved plot to {out_path}")

    def _stats(self) -> None:
        if not self.last_result:
            print("No simulation yet")
            return
        r = self.last_result
        print(r.summary_frame().to_string())
        print(f"Total time: {r.total_time:.2f}")
        print(f"Throughput: {r.throughput:.4f} jobs/unit")


def main() -> None:
    ManualTerminal().prompt()


if __name__ == "__main__":
    main()
