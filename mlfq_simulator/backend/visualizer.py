from __future__ import annotations

from typing import List, Optional, Dict
import os
import matplotlib.pyplot as plt

from .core import Process
from .utils import EventLogger


def ensure_dir(path: str) -> None:
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)


def plot_timeline(processes: List[Process], logger: EventLogger, out_path: Optional[str] = None) -> None:
    fig, ax = plt.subplots(figsize=(12, 3 + 0.3 * max(1, len(processes))))

    pid_to_color = {p.pid: p.color for p in processes}
    pids_order = [p.pid for p in processes]
    y_positions: Dict[str, int] = {pid: i for i, pid in enumerate(pids_order)}

    for seg in logger.timeline:
        pid = seg["pid"]
        if pid not in y_positions:
            continue
        start = seg["start"]
        end = seg["end"]
        blocked = seg.get("kind") == "io"
        ax.barh(
            y_positions[pid],
            end - start,
            left=start,
            color="#dddddd" if blocked else pid_to_color.get(pid, "#777777"),
            hatch="//" if blocked else None,
            edgecolor="black",
            alpha=0.9,
        )
        if end - start > 0:
            ax.text((start + end) / 2, y_positions[pid], seg["queue"], ha="center", va="center", fontsize=7)

    # Mark priority boosts
    for boost in logger.boosts:
        ax.axvline(boost["time"], color="#aa3333", linestyle="--", alpha=0.7)
        ax.text(boost["time"], len(y_positions) - 0.4, "boost", rotation=90, va="bottom", ha="right", fontsize=8)

    ax.set_yticks([y_positions[pid] for pid in pids_order])
    ax.set_yticklabels(pids_order)
    ax.set_xlabel("Time")
    ax.set_title("MLFQ Timeline (hatched = blocked on I/O)")
    ax.grid(True, axis="x", linestyle=":", alpha=0.5)
    fig.tight_layout()

    if out_path:
        ensure_dir(out_path)
        fig.savefig(out_path, dpi=150)
        plt.close(fig)
    else:
        plt.show()
