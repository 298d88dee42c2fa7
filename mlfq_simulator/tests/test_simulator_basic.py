import json

from ..backend.clock import VirtualClock
from ..backend.constants import SchedulerConfig
from ..backend.core import Process
from ..backend.manual_terminal import ManualTerminal
from ..backend.simulator import simulate
from ..backend.visualizer import plot_timeline
from ..scripts.run_simulation import generate_workload, main


def make_procs():
    return [
        Process("A", 5),
        Process("B", 25),
        Process("C", 5, io_time=20),
    ]


def test_all_processes_complete():
    procs = make_procs()
    result = simulate(procs, clock=VirtualClock(step=10.0))

    assert all(p.completion_time is not None for p in result.processes)
    assert result.total_time >= 25.0
    assert set(result.turnaround_times) == {"A", "B", "C"}
    assert result.throughput > 0


def test_summary_frame():
    procs = make_procs()
    result = simulate(procs, clock=VirtualClock(step=10.0))
    frame = result.summary_frame()

    assert list(frame.index) == ["A", "B", "C"]
    assert frame.loc["A", "completion_time"] == 5.0
    assert frame.loc["A", "turnaround"] == 5.0
    assert frame["waiting"].min() >= 0


def test_short_job_finishes_before_long_job():
    long_job = Process("LONG", 200)
    short_job = Process("SHORT", 10)
    simulate([long_job, short_job], clock=VirtualClock(step=10.0))
    assert short_job.completion_time < long_job.completion_time


def test_event_log_export(tmp_path):
    result = simulate(make_procs(), config=SchedulerConfig(global_quantum=20), clock=VirtualClock(step=10.0))
    base = tmp_path / "run"
    result.logger.export_json(str(base) + ".json")
    result.logger.export_csv(str(base))

    data = json.loads((tmp_path / "run.json").read_text(encoding="utf-8"))
    assert {e["event"] for e in data["process_events"]} == {"admit", "finish"}
    assert data["boosts"]
    for suffix in ("events", "interrupts", "timeline"):
        assert (tmp_path / f"run_{suffix}.csv").exists()


def test_plot_timeline_writes_file(tmp_path):
    procs = make_procs()
    result = simulate(procs, config=SchedulerConfig(global_quantum=20), clock=VirtualClock(step=10.0))
    out = tmp_path / "charts" / "timeline.png"
    plot_timeline(procs, result.logger, str(out))
    assert out.exists()


def test_generated_workload_is_reproducible():
    first = generate_workload(8, seed=3)
    second = generate_workload(8, seed=3)
    assert [(p.cpu_time, p.io_time) for p in first] == [(p.cpu_time, p.io_time) for p in second]


def test_cli_main_writes_logs(tmp_path):
    base = tmp_path / "cli"
    assert main(["--n", "6", "--seed", "1", "--log", str(base)]) == 0
    assert (tmp_path / "cli.json").exists()


def test_cli_reports_bad_config():
    assert main(["--levels", "0"]) == 1


def test_manual_terminal_add_and_run():
    terminal = ManualTerminal()
    terminal.handle_command("add A 5")
    terminal.handle_command("add B 40 20")
    terminal.handle_command("add C notanumber")
    assert [p.pid for p in terminal.processes] == ["A", "B"]

    terminal.handle_command("run --step 10 --levels 2")
    assert terminal.last_result is not None
    assert all(p.completion_time is not None for p in terminal.last_result.processes)
    # Terminal keeps its own templates untouched between runs
    assert terminal.processes[1].remaining_cpu == 40


def test_waiting_is_turnaround_minus_bursts():
    procs = make_procs() + [Process("D", 60, io_time=30)]
    result = simulate(procs, clock=VirtualClock(step=10.0))

    for p in procs:
        expected = max(0.0, result.turnaround_times[p.pid] - p.cpu_time - p.io_time)
        assert result.waiting_times[p.pid] == expected
